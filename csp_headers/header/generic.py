"""Arbitrary ``Name: value`` header."""

from __future__ import annotations

import structlog

from csp_headers.exceptions import InvalidArgumentError, InvalidHeaderNameError
from csp_headers.header.base import Header, split_header_line
from csp_headers.utils.sanitize import is_valid_field_name, is_valid_field_value

logger = structlog.get_logger()


class GenericHeader(Header):
    """Header with no semantics beyond its name and raw value."""

    def __init__(self, field_name: str, field_value: str = "") -> None:
        if not is_valid_field_name(field_name):
            logger.warning("header_name_rejected", length=len(field_name))
            raise InvalidHeaderNameError("Header name must be a valid RFC 7230 token")
        if not is_valid_field_value(field_value):
            logger.warning("header_injection_rejected", header=field_name, length=len(field_value))
            raise InvalidArgumentError(f"Invalid value for header {field_name!r}")
        self._field_name = field_name
        self._field_value = field_value

    @classmethod
    def from_string(cls, header_line: str) -> GenericHeader:
        name, value = split_header_line(header_line)
        return cls(name, value)

    def get_field_name(self) -> str:
        return self._field_name

    def get_field_value(self) -> str:
        return self._field_value

    def __repr__(self) -> str:
        return f"GenericHeader({self._field_name!r}, {self._field_value!r})"
