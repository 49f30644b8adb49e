"""User names, domains and tags."""

from __future__ import annotations

import re
from dataclasses import dataclass

from entitytags.base import Tag, _quote

USER_TAG_KIND = "user"
LOCAL_USER_DOMAIN = "local"

# Single-character user names or domains are not accepted.
VALID_USER_NAME_SNIPPET = "[a-zA-Z0-9][a-zA-Z0-9.+-]*[a-zA-Z0-9]"
VALID_USER_SNIPPET = (
    f"(?:{VALID_USER_NAME_SNIPPET}(?:@{VALID_USER_NAME_SNIPPET})?)"
)

_VALID_NAME = re.compile(
    f"(?P<name>{VALID_USER_NAME_SNIPPET})(?:@(?P<domain>{VALID_USER_NAME_SNIPPET}))?"
)
_VALID_USER_NAME = re.compile(VALID_USER_NAME_SNIPPET)


def is_valid_user(user_id: str) -> bool:
    """Report whether user_id is a valid user id, with or without @domain."""
    return _VALID_NAME.fullmatch(user_id) is not None


def is_valid_user_name(name: str) -> bool:
    """Report whether name is a valid user name without a domain."""
    return _VALID_USER_NAME.fullmatch(name) is not None


def is_valid_user_domain(domain: str) -> bool:
    """Report whether domain is a valid user domain."""
    return _VALID_USER_NAME.fullmatch(domain) is not None


@dataclass(frozen=True)
class UserTag(Tag):
    """Tag naming a user, stored locally or in some external domain."""

    user_name: str = ""
    user_domain: str = ""

    def kind(self) -> str:
        return USER_TAG_KIND

    def id(self) -> str:
        """Return the user id; local users never carry a domain."""
        if self.user_domain in ("", LOCAL_USER_DOMAIN):
            return self.user_name
        return f"{self.user_name}@{self.user_domain}"

    def name(self) -> str:
        """Return the name part of the user without its domain."""
        return self.user_name

    def domain(self) -> str:
        """Return the user domain."""
        return self.user_domain

    def is_local(self) -> bool:
        """Report whether the tag represents a local user."""
        return self.user_domain in ("", LOCAL_USER_DOMAIN)

    def with_domain(self, domain: str) -> UserTag:
        """Return a copy of the tag with the domain replaced."""
        if not is_valid_user_domain(domain):
            raise ValueError(f"invalid user domain {_quote(domain)}")
        return UserTag(self.user_name, domain)


def new_user_tag(user_name: str) -> UserTag:
    """Return the tag for the given user, raising ValueError if it is invalid."""
    match = _VALID_NAME.fullmatch(user_name)
    if match is None:
        raise ValueError(f"invalid user tag {_quote(user_name)}")
    domain = match.group("domain") or ""
    if domain == LOCAL_USER_DOMAIN:
        domain = ""
    return UserTag(match.group("name"), domain)


def new_local_user_tag(name: str) -> UserTag:
    """Return the tag for a local user with the given name."""
    if not is_valid_user_name(name):
        raise ValueError(f"invalid user name {_quote(name)}")
    return UserTag(name)