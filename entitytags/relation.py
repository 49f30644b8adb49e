"""Relation keys and tags."""

from __future__ import annotations

import re
from dataclasses import dataclass

from entitytags.application import APPLICATION_SNIPPET
from entitytags.base import Tag, _quote

RELATION_TAG_KIND = "relation"

RELATION_SNIPPET = "[a-z][a-z0-9]*(?:[_-][a-z0-9]+)*"

# Relation keys look like "app1:rel1 app2:rel2", or "app:rel" for peers.
# Tag suffixes look like "app1.rel1#app2.rel2", or "app.rel" for peers.
_VALID_RELATION = re.compile(
    APPLICATION_SNIPPET
    + ":"
    + RELATION_SNIPPET
    + " "
    + APPLICATION_SNIPPET
    + ":"
    + RELATION_SNIPPET
)
_VALID_PEER_RELATION = re.compile(APPLICATION_SNIPPET + ":" + RELATION_SNIPPET)


def is_valid_relation(key: str) -> bool:
    """Report whether key is a valid relation key."""
    return (
        _VALID_RELATION.fullmatch(key) is not None
        or _VALID_PEER_RELATION.fullmatch(key) is not None
    )


def _relation_suffix_to_key(suffix: str) -> str:
    return suffix.replace(".", ":", 2).replace("#", " ", 1)


@dataclass(frozen=True)
class RelationTag(Tag):
    """Tag naming a relation; ``key`` is in tag-suffix form."""

    key: str = ""

    def kind(self) -> str:
        return RELATION_TAG_KIND

    def id(self) -> str:
        return _relation_suffix_to_key(self.key)

    def __str__(self) -> str:
        return f"{RELATION_TAG_KIND}-{self.key}"


def new_relation_tag(relation_key: str) -> RelationTag:
    """Return the tag for a relation key, raising ValueError if invalid."""
    if not is_valid_relation(relation_key):
        raise ValueError(f"{_quote(relation_key)} is not a valid relation key")
    return RelationTag(relation_key.replace(":", ".", 2).replace(" ", "#", 1))