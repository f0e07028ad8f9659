"""Content-Security-Policy header value object.

Parses a raw ``Content-Security-Policy: ...`` line into an ordered mapping of
directive name to source tokens, validates every directive through
:meth:`ContentSecurityPolicy.set_directive` and renders the mapping back to
wire format, either as one line or as several same-named lines.
"""

from __future__ import annotations

from typing import Iterable

import structlog

from csp_headers.exceptions import InvalidArgumentError, InvalidHeaderNameError
from csp_headers.header.base import MultipleHeader, split_header_line
from csp_headers.utils.sanitize import is_valid_field_value, is_valid_source_token

logger = structlog.get_logger()

NONE = "'none'"
SELF = "'self'"

ALLOWED_DIRECTIVES = frozenset({
    "base-uri",
    "block-all-mixed-content",
    "child-src",
    "connect-src",
    "default-src",
    "fenced-frame-src",
    "font-src",
    "form-action",
    "frame-ancestors",
    "frame-src",
    "img-src",
    "manifest-src",
    "media-src",
    "navigate-to",
    "object-src",
    "plugin-types",
    "prefetch-src",
    "report-to",
    "report-uri",
    "require-sri-for",
    "require-trusted-types-for",
    "sandbox",
    "script-src",
    "script-src-attr",
    "script-src-elem",
    "style-src",
    "style-src-attr",
    "style-src-elem",
    "trusted-types",
    "upgrade-insecure-requests",
    "worker-src",
})


class ContentSecurityPolicy(MultipleHeader):
    """Content-Security-Policy header.

    Directives keep insertion order. Setting a directive replaces its whole
    source list; an empty list blocks everything (``'none'``), except for
    ``report-uri`` where it removes the directive.
    """

    FIELD_NAME = "Content-Security-Policy"

    def __init__(self) -> None:
        self._directives: dict[str, list[str]] = {}

    @classmethod
    def from_string(cls, header_line: str) -> ContentSecurityPolicy:
        """Parse a full ``Content-Security-Policy: ...`` header line."""
        name, value = split_header_line(header_line)
        if name.lower() != cls.FIELD_NAME.lower():
            logger.warning("csp_header_name_rejected", expected=cls.FIELD_NAME, received=name[:64])
            raise InvalidHeaderNameError(f"Invalid header line for {cls.FIELD_NAME} string")
        return cls.from_field_value(value)

    @classmethod
    def from_field_value(cls, field_value: str) -> ContentSecurityPolicy:
        """Parse a bare field value such as ``default-src 'self'; img-src *``.

        Empty clauses are skipped and a repeated directive replaces the
        earlier one. The first invalid directive aborts the parse.
        """
        header = cls()
        for clause in field_value.split(";"):
            tokens = clause.split()
            if not tokens:
                continue
            header.set_directive(tokens[0], tokens[1:])
        logger.debug("csp_parsed", header=cls.FIELD_NAME, directives=len(header._directives))
        return header

    def set_directive(self, name: str, sources: Iterable[str]) -> ContentSecurityPolicy:
        """Replace the source list of directive ``name`` and return self."""
        if name not in ALLOWED_DIRECTIVES:
            logger.warning("csp_directive_rejected", directive=name[:64])
            raise InvalidArgumentError(
                f"{type(self).__name__} expects a valid policy directive name; received {name!r}"
            )
        if isinstance(sources, str):
            raise InvalidArgumentError(
                f"Sources for directive {name!r} must be a sequence of tokens, not a string"
            )
        values = list(sources)
        for value in values:
            if not isinstance(value, str) or not is_valid_field_value(value):
                logger.warning("header_injection_rejected", header=self.FIELD_NAME, directive=name)
                raise InvalidArgumentError(f"Invalid source value for directive {name!r}")
            if not is_valid_source_token(value):
                logger.warning("csp_source_rejected", directive=name, length=len(value))
                raise InvalidArgumentError(
                    f"Source for directive {name!r} must be a single non-empty token"
                    " without whitespace, ';' or ','"
                )

        if not values:
            if name == "report-uri":
                self._directives.pop(name, None)
                return self
            values = [NONE]

        self._directives[name] = values
        return self

    @property
    def directives(self) -> dict[str, list[str]]:
        """Copy of the directive mapping, in insertion order."""
        return {name: list(values) for name, values in self._directives.items()}

    def get_directives(self) -> dict[str, list[str]]:
        return self.directives

    def get_field_name(self) -> str:
        return self.FIELD_NAME

    def get_field_value(self) -> str:
        return " ".join(
            f"{' '.join([name, *values])};" for name, values in self._directives.items()
        )

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._directives == other._directives

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.get_field_value()!r})"


class ContentSecurityPolicyReportOnly(ContentSecurityPolicy):
    """Content-Security-Policy-Report-Only header.

    Same directive semantics; violations are reported, not enforced.
    """

    FIELD_NAME = "Content-Security-Policy-Report-Only"
