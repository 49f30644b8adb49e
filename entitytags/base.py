"""Core tag abstraction shared by every kind of entity tag."""

from __future__ import annotations

import re
import uuid
from abc import ABC, abstractmethod

# Non-compiled pattern matching a single uppercase character.
UPPERCASE_SNIPPET = "[A-Z]"
# Non-compiled pattern for small non-negative numbers without leading zeros.
NUMBER_SNIPPET = "(?:0|[1-9][0-9]*)"

_VALID_UUID = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}"
)

_ESCAPES = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
    '"': '\\"',
    "\\": "\\\\",
}


def _quote(text: str) -> str:
    """Return text in double quotes, escaping quotes and unprintable characters."""
    pieces = ['"']
    for ch in text:
        if ch in _ESCAPES:
            pieces.append(_ESCAPES[ch])
        elif ch.isprintable():
            pieces.append(ch)
        else:
            code = ord(ch)
            if code < 0x80:
                pieces.append(f"\\x{code:02x}")
            elif code < 0x10000:
                pieces.append(f"\\u{code:04x}")
            else:
                pieces.append(f"\\U{code:08x}")
    pieces.append('"')
    return "".join(pieces)


class Tag(ABC):
    """Uniquely identifies a resource.

    ``id()`` gives the human-readable identifier, ``str()`` the
    machine-friendly form ``<kind>-<suffix>``.
    """

    @abstractmethod
    def kind(self) -> str:
        """Return the kind of the tag."""

    @abstractmethod
    def id(self) -> str:
        """Return the identifier of the tagged entity."""

    def __str__(self) -> str:
        return f"{self.kind()}-{self.id()}"


class InvalidTagError(ValueError):
    """Raised when a string is not a valid tag (of an expected kind)."""

    def __init__(self, tag: str, kind: str = "") -> None:
        self.tag = tag
        self.kind = kind
        if kind:
            message = f"{_quote(tag)} is not a valid {kind} tag"
        else:
            message = f"{_quote(tag)} is not a valid tag"
        super().__init__(message)


def invalid_tag_error(tag: str, kind: str = "") -> InvalidTagError:
    """Build the error reported for an unparseable tag string."""
    return InvalidTagError(tag, kind)


def readable_string(tag: Tag | None) -> str:
    """Return a human-readable "<kind> <id>" string, or "" for no tag."""
    if tag is None:
        return ""
    return f"{tag.kind()} {tag.id()}"


def is_valid_uuid_string(value: str) -> bool:
    """Report whether value is a lowercase, hyphenated UUID string."""
    return _VALID_UUID.fullmatch(value) is not None


def uuid_from_string(value: str) -> uuid.UUID:
    """Parse a UUID string, raising ValueError if it is not valid."""
    if not is_valid_uuid_string(value):
        raise ValueError(f"invalid UUID: {_quote(value)}")
    return uuid.UUID(value)