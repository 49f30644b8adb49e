"""Charm URLs and charm tags."""

from __future__ import annotations

import re
from dataclasses import dataclass

from entitytags.base import Tag, _quote
from entitytags.user import VALID_USER_NAME_SNIPPET

CHARM_TAG_KIND = "charm"

# A charm URL is valid in either the V1 or the V3 form.
#
# V1: schema:~user/series/name-revision
#   schema    optional, "local" or "cs" ("cs" when omitted)
#   user      optional, only with the "cs" schema
#   series    optional, a valid series name
#   name      mandatory, the charm name
#   revision  optional, -1 when unset
#
# V3: schema:user/name/series/revision, with the same fields and constraints.

SERIES_SNIPPET = "[a-z]+([a-z0-9]+)?"
CHARM_NAME_SNIPPET = "[a-z][a-z0-9]*(-[a-z0-9]*[a-z][a-z0-9]*)*"

_LOCAL_SCHEMA_SNIPPET = "local:"
_V1_CHARM_STORE_SCHEMA_SNIPPET = "cs:(~" + VALID_USER_NAME_SNIPPET + "/)?"
_REVISION_SNIPPET = "(-1|0|[1-9][0-9]*)"
_V3_CHARM_STORE_SCHEMA_SNIPPET = "(cs:)?(" + VALID_USER_NAME_SNIPPET + "/)?"

_VALID_V1_CHARM = re.compile(
    "("
    + _LOCAL_SCHEMA_SNIPPET
    + "|"
    + _V1_CHARM_STORE_SCHEMA_SNIPPET
    + ")?("
    + SERIES_SNIPPET
    + "/)?"
    + CHARM_NAME_SNIPPET
    + "(-"
    + _REVISION_SNIPPET
    + ")?"
)

_VALID_V3_CHARM = re.compile(
    "("
    + _LOCAL_SCHEMA_SNIPPET
    + "|"
    + _V3_CHARM_STORE_SCHEMA_SNIPPET
    + ")"
    + CHARM_NAME_SNIPPET
    + "(/"
    + SERIES_SNIPPET
    + ")?(/"
    + _REVISION_SNIPPET
    + ")?"
)


def is_valid_charm(url: str) -> bool:
    """Report whether url is a valid charm URL."""
    return (
        _VALID_V1_CHARM.fullmatch(url) is not None
        or _VALID_V3_CHARM.fullmatch(url) is not None
    )


@dataclass(frozen=True)
class CharmTag(Tag):
    """Tag naming a charm by its URL."""

    url: str = ""

    def kind(self) -> str:
        return CHARM_TAG_KIND

    def id(self) -> str:
        return self.url


def new_charm_tag(charm_url: str) -> CharmTag:
    """Return the tag for the charm URL, raising ValueError if it is invalid."""
    if not is_valid_charm(charm_url):
        raise ValueError(f"{_quote(charm_url)} is not a valid charm name")
    return CharmTag(charm_url)