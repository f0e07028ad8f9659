"""Minimal ordered header collection that renders a header block."""

from __future__ import annotations

from typing import Iterator

import structlog

from csp_headers.header.base import CRLF, Header, MultipleHeader, split_header_line
from csp_headers.header.content_security_policy import (
    ContentSecurityPolicy,
    ContentSecurityPolicyReportOnly,
)
from csp_headers.header.generic import GenericHeader

logger = structlog.get_logger()

# Header classes parsed by add_header_line, keyed by lowercased field name
_HEADER_TYPES: dict[str, type[ContentSecurityPolicy]] = {
    ContentSecurityPolicy.FIELD_NAME.lower(): ContentSecurityPolicy,
    ContentSecurityPolicyReportOnly.FIELD_NAME.lower(): ContentSecurityPolicyReportOnly,
}


class Headers:
    """Ordered collection of header objects.

    Repeated multiple-headers (e.g. two Content-Security-Policy objects) are
    rendered together through the first one's ``to_string_multiple_headers``.
    """

    def __init__(self) -> None:
        self._headers: list[Header] = []

    def add_header(self, header: Header) -> Headers:
        self._headers.append(header)
        return self

    def add_header_line(self, header_line: str) -> Headers:
        """Parse ``header_line`` into the matching header type and add it."""
        name, _ = split_header_line(header_line)
        header_cls = _HEADER_TYPES.get(name.lower())
        if header_cls is None:
            return self.add_header(GenericHeader.from_string(header_line))
        return self.add_header(header_cls.from_string(header_line))

    def get(self, name: str) -> Header | list[Header] | None:
        """Case-insensitive lookup; a list when the name occurs more than once."""
        matches = [h for h in self._headers if h.get_field_name().lower() == name.lower()]
        if not matches:
            return None
        if len(matches) == 1:
            return matches[0]
        return matches

    def has(self, name: str) -> bool:
        return self.get(name) is not None

    def __len__(self) -> int:
        return len(self._headers)

    def __iter__(self) -> Iterator[Header]:
        return iter(self._headers)

    def to_string(self) -> str:
        """Render every header as a CRLF-terminated line."""
        groups: dict[str, list[Header]] = {}
        for header in self._headers:
            groups.setdefault(header.get_field_name().lower(), []).append(header)

        lines = []
        for group in groups.values():
            first, *rest = group
            if isinstance(first, MultipleHeader):
                lines.append(first.to_string_multiple_headers(rest))
            else:
                lines.extend(header.to_string() + CRLF for header in group)
        logger.debug("headers_rendered", count=len(self._headers))
        return "".join(lines)
