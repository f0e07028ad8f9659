"""Header interfaces and shared line splitting."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable

import structlog

from csp_headers.exceptions import HeaderRuntimeError, InvalidArgumentError
from csp_headers.utils.sanitize import contains_crlf, strip_line_terminator

logger = structlog.get_logger()

CRLF = "\r\n"


def split_header_line(header_line: str) -> tuple[str, str]:
    """Split ``Name: value`` on the first colon.

    A single trailing line terminator is tolerated; any other CR or LF
    in the line is rejected before the line is split.
    """
    line = strip_line_terminator(header_line)
    if contains_crlf(line):
        logger.warning("header_injection_rejected", length=len(header_line))
        raise InvalidArgumentError("Header line contains an invalid CR or LF character")
    if ":" not in line:
        raise InvalidArgumentError("Header line must be in the form 'Name: value'")
    name, value = line.split(":", 1)
    return name.strip(), value.strip()


class Header(ABC):
    """A single HTTP header field."""

    @abstractmethod
    def get_field_name(self) -> str:
        ...

    @abstractmethod
    def get_field_value(self) -> str:
        ...

    @property
    def field_name(self) -> str:
        return self.get_field_name()

    @property
    def field_value(self) -> str:
        return self.get_field_value()

    def to_string(self) -> str:
        """Render ``Name: value`` without a line terminator."""
        return f"{self.get_field_name()}: {self.get_field_value()}"

    def __str__(self) -> str:
        return self.to_string()


class MultipleHeader(Header):
    """A header that may legitimately appear more than once in a block."""

    def to_string_multiple_headers(self, headers: Iterable[Header]) -> str:
        """Render this header and ``headers`` as CRLF-terminated lines.

        Every additional header must be of exactly this header's type.
        """
        others = list(headers)
        name = type(self).__name__
        for header in others:
            if type(header) is not type(self):
                logger.warning(
                    "multiple_header_type_mismatch",
                    expected=name,
                    received=type(header).__name__,
                )
                raise HeaderRuntimeError(
                    f"The {name} multiple header implementation"
                    f" can only accept an array of {name} headers"
                )
        return "".join(header.to_string() + CRLF for header in [self, *others])
