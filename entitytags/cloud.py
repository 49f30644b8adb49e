"""Cloud and cloud credential tags."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from urllib.parse import unquote_plus

from entitytags.base import Tag, _quote
from entitytags.user import VALID_USER_SNIPPET, UserTag, new_user_tag

CLOUD_TAG_KIND = "cloud"
CLOUD_CREDENTIAL_TAG_KIND = "cloudcred"

CLOUD_SNIPPET = "[a-zA-Z0-9][a-zA-Z0-9._-]*"
_CLOUD_CREDENTIAL_NAME_SNIPPET = "[a-zA-Z][a-zA-Z0-9.@_+-]*"

_VALID_CLOUD = re.compile(CLOUD_SNIPPET)
_VALID_CLOUD_CREDENTIAL_NAME = re.compile(_CLOUD_CREDENTIAL_NAME_SNIPPET)
_VALID_CLOUD_CREDENTIAL = re.compile(
    f"({CLOUD_SNIPPET})/({VALID_USER_SNIPPET})/({_CLOUD_CREDENTIAL_NAME_SNIPPET})"
)
_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def is_valid_cloud(cloud_id: str) -> bool:
    """Report whether cloud_id is a valid cloud id."""
    return _VALID_CLOUD.fullmatch(cloud_id) is not None


@dataclass(frozen=True)
class CloudTag(Tag):
    """Tag naming a cloud."""

    cloud_id: str = ""

    def kind(self) -> str:
        return CLOUD_TAG_KIND

    def id(self) -> str:
        return self.cloud_id


def new_cloud_tag(cloud_id: str) -> CloudTag:
    """Return the tag for the given cloud, raising ValueError if it is invalid."""
    if not is_valid_cloud(cloud_id):
        raise ValueError(f"{_quote(cloud_id)} is not a valid cloud ID")
    return CloudTag(cloud_id)


def _quote_credential_separator(text: str) -> str:
    return text.replace("_", "%5f")


@dataclass(frozen=True)
class CloudCredentialTag(Tag):
    """Tag naming a credential owned by a user for a cloud."""

    cloud_tag: CloudTag = field(default_factory=CloudTag)
    owner_tag: UserTag = field(default_factory=UserTag)
    credential_name: str = ""

    def is_zero(self) -> bool:
        """Report whether the tag is empty."""
        return self == CloudCredentialTag()

    def kind(self) -> str:
        return CLOUD_CREDENTIAL_TAG_KIND

    def id(self) -> str:
        """Return "cloud/owner/name", or "" for an empty tag."""
        if self.is_zero():
            return ""
        return f"{self.cloud_tag.id()}/{self.owner_tag.id()}/{self.credential_name}"

    def __str__(self) -> str:
        if self.is_zero():
            return ""
        parts = (self.cloud_tag.id(), self.owner_tag.id(), self.credential_name)
        return f"{CLOUD_CREDENTIAL_TAG_KIND}-" + "_".join(
            _quote_credential_separator(part) for part in parts
        )

    def cloud(self) -> CloudTag:
        """Return the tag of the cloud the credential belongs to."""
        return self.cloud_tag

    def owner(self) -> UserTag:
        """Return the tag of the user owning the credential."""
        return self.owner_tag

    def name(self) -> str:
        """Return the credential name without cloud and owner."""
        return self.credential_name


def new_cloud_credential_tag(credential_id: str) -> CloudCredentialTag:
    """Return the tag for a "cloud/owner/name" credential id."""
    match = _VALID_CLOUD_CREDENTIAL.fullmatch(credential_id)
    if match is None:
        raise ValueError(f"{_quote(credential_id)} is not a valid cloud credential ID")
    cloud, owner, name = match.groups()
    return CloudCredentialTag(new_cloud_tag(cloud), new_user_tag(owner), name)


def is_valid_cloud_credential(credential_id: str) -> bool:
    """Report whether credential_id is a valid cloud credential id."""
    return _VALID_CLOUD_CREDENTIAL.fullmatch(credential_id) is not None


def is_valid_cloud_credential_name(name: str) -> bool:
    """Report whether name is a valid cloud credential name."""
    return _VALID_CLOUD_CREDENTIAL_NAME.fullmatch(name) is not None


def _query_unescape(text: str) -> str:
    bad = _BAD_ESCAPE.search(text)
    if bad is not None:
        start = bad.start()
        raise ValueError(f"invalid URL escape {_quote(text[start:start + 3])}")
    return unquote_plus(text)


def _cloud_credential_suffix_to_id(suffix: str) -> str:
    """Turn the suffix of a cloudcred tag string back into a credential id."""
    return _query_unescape(suffix.replace("_", "/"))