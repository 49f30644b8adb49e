"""Application and application offer names and tags."""

from __future__ import annotations

import re
import unicodedata
from dataclasses import dataclass

from entitytags.base import UPPERCASE_SNIPPET, Tag, _quote

APPLICATION_TAG_KIND = "application"
APPLICATION_OFFER_TAG_KIND = "applicationoffer"

# Non-compiled pattern that can be composed with other snippets.
APPLICATION_SNIPPET = "(?:[a-z][a-z0-9]*(?:-[a-z0-9]*[a-z][a-z0-9]*)*)"
APPLICATION_OFFER_SNIPPET = "(?:[a-z][a-z0-9]*(?:-[a-z0-9]*[a-z][a-z0-9]*)*)"

_VALID_APPLICATION = re.compile(APPLICATION_SNIPPET)
_VALID_APPLICATION_OFFER = re.compile(APPLICATION_OFFER_SNIPPET)
_UPPERCASE_CHAR = re.compile(UPPERCASE_SNIPPET)
_TAIL_NUMBER_SUFFIX = re.compile(r"-[0-9]+\Z")


def is_valid_application(name: str) -> bool:
    """Report whether name is a valid application name."""
    return _VALID_APPLICATION.fullmatch(name) is not None


def _is_invalid_application_char(ch: str) -> bool:
    if "a" <= ch <= "z" or ch == "-":
        return False
    return not unicodedata.category(ch).startswith("N")


def validate_application_name(name: str) -> None:
    """Raise ValueError explaining why name is not a valid application name."""
    if is_valid_application(name):
        return
    quoted = _quote(name)
    if _UPPERCASE_CHAR.search(name):
        raise ValueError(
            f"invalid application name {quoted}, unexpected uppercase character"
        )
    if _TAIL_NUMBER_SUFFIX.search(name):
        raise ValueError(
            f"invalid application name {quoted}, "
            "unexpected number(s) found after last hyphen"
        )
    bad = next((ch for ch in name if _is_invalid_application_char(ch)), None)
    if bad is None:
        raise ValueError(f"invalid application name {quoted}")
    raise ValueError(f"invalid application name {quoted}, unexpected character {bad}")


@dataclass(frozen=True)
class ApplicationTag(Tag):
    """Tag naming an application."""

    name: str = ""

    def kind(self) -> str:
        return APPLICATION_TAG_KIND

    def id(self) -> str:
        return self.name


def new_application_tag(application_name: str) -> ApplicationTag:
    """Return the tag for the application with the given name."""
    return ApplicationTag(application_name)


def is_valid_application_offer(name: str) -> bool:
    """Report whether name is a valid application offer name."""
    return _VALID_APPLICATION_OFFER.fullmatch(name) is not None


@dataclass(frozen=True)
class ApplicationOfferTag(Tag):
    """Tag naming an application offer."""

    name: str = ""

    def kind(self) -> str:
        return APPLICATION_OFFER_TAG_KIND

    def id(self) -> str:
        return self.name


def new_application_offer_tag(offer_name: str) -> ApplicationOfferTag:
    """Return the tag for the application offer with the given name."""
    return ApplicationOfferTag(offer_name)