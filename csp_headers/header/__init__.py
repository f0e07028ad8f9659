"""Header value objects."""

from csp_headers.header.base import Header, MultipleHeader
from csp_headers.header.content_security_policy import (
    ContentSecurityPolicy,
    ContentSecurityPolicyReportOnly,
)
from csp_headers.header.generic import GenericHeader

__all__ = [
    'ContentSecurityPolicy',
    'ContentSecurityPolicyReportOnly',
    'GenericHeader',
    'Header',
    'MultipleHeader',
]
