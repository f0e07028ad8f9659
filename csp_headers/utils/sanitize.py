"""Shared header value checks used by every header type."""

from __future__ import annotations

import re

# Bare CR or LF anywhere enables response splitting.
CRLF_RE = re.compile(r"[\r\n]")

# C0 controls except HTAB, plus DEL. These are never valid in a field value.
CONTROL_CHARS_RE = re.compile(r"[\x00-\x08\x0a-\x1f\x7f]")

# RFC 7230 token characters for field names.
FIELD_NAME_RE = re.compile(r"[!#$%&'*+\-.^_`|~0-9A-Za-z]+")

# Whitespace ends a source token; ';' ends a directive and ',' a policy.
SOURCE_DELIMITER_RE = re.compile(r"[\s;,]")


def contains_crlf(value: str) -> bool:
    """Return True if the value carries a CR or LF character."""
    return CRLF_RE.search(value) is not None


def is_valid_field_value(value: str) -> bool:
    """Return True if the value is safe to emit as a header field value."""
    return CONTROL_CHARS_RE.search(value) is None


def is_valid_field_name(name: str) -> bool:
    """Return True if the name is a non-empty RFC 7230 token."""
    return FIELD_NAME_RE.fullmatch(name) is not None


def is_valid_source_token(value: str) -> bool:
    """Return True if the value is one non-empty CSP source expression."""
    return bool(value) and SOURCE_DELIMITER_RE.search(value) is None


def strip_line_terminator(line: str) -> str:
    """Strip a single trailing CRLF (or LF) left by the transport layer."""
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith("\n"):
        return line[:-1]
    return line
