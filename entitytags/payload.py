"""Charm payload tags."""

from __future__ import annotations

import re
from dataclasses import dataclass

from entitytags.base import Tag, is_valid_uuid_string

PAYLOAD_TAG_KIND = "payload"

_PAYLOAD_CLASS = "([a-zA-Z](?:[a-zA-Z0-9-]*[a-zA-Z0-9])?)"

_VALID_PAYLOAD = re.compile(_PAYLOAD_CLASS)


def is_valid_payload(payload_id: str) -> bool:
    """Report whether payload_id is a valid payload id (alphanumerics and hyphens)."""
    return _VALID_PAYLOAD.fullmatch(payload_id) is not None


def _is_valid_payload_or_uuid(payload_id: str) -> bool:
    # UUIDs are accepted too, for compatibility with older payload ids.
    return is_valid_payload(payload_id) or is_valid_uuid_string(payload_id)


@dataclass(frozen=True)
class PayloadTag(Tag):
    """Tag naming a charm payload."""

    payload_id: str = ""

    def kind(self) -> str:
        return PAYLOAD_TAG_KIND

    def id(self) -> str:
        """Return the id the tag was created with."""
        return self.payload_id


def new_payload_tag(payload_id: str) -> PayloadTag:
    """Return the tag for a charm payload with the given id."""
    return PayloadTag(payload_id)