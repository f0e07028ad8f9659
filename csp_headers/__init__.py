"""
csp-headers - Content-Security-Policy header value objects
"""

__version__ = "0.1.0"

from csp_headers.exceptions import HeaderRuntimeError, InvalidArgumentError, InvalidHeaderNameError
from csp_headers.header.content_security_policy import (
    ContentSecurityPolicy,
    ContentSecurityPolicyReportOnly,
)
from csp_headers.header.generic import GenericHeader
from csp_headers.headers import Headers

__all__ = [
    'ContentSecurityPolicy',
    'ContentSecurityPolicyReportOnly',
    'GenericHeader',
    'Headers',
    'HeaderRuntimeError',
    'InvalidArgumentError',
    'InvalidHeaderNameError',
]
