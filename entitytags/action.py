"""Action and operation tags."""

from __future__ import annotations

import re
from dataclasses import dataclass

from entitytags.base import (
    NUMBER_SNIPPET,
    Tag,
    _quote,
    is_valid_uuid_string,
    uuid_from_string,
)

ACTION_TAG_KIND = "action"
OPERATION_TAG_KIND = "operation"

# Actions and operations are identified by a unique, incrementing number.
ACTION_SNIPPET = NUMBER_SNIPPET
OPERATION_SNIPPET = NUMBER_SNIPPET

_VALID_ACTION_V2 = re.compile(ACTION_SNIPPET)
_VALID_OPERATION = re.compile(OPERATION_SNIPPET)


@dataclass(frozen=True)
class ActionTag(Tag):
    """Tag naming an action by UUID or number."""

    action_id: str = ""

    def kind(self) -> str:
        return ACTION_TAG_KIND

    def id(self) -> str:
        return self.action_id


def new_action_tag(action_id: str) -> ActionTag:
    """Return the tag of an action, raising ValueError if the id is invalid."""
    try:
        return ActionTag(str(uuid_from_string(action_id)))
    except ValueError:
        pass
    if _VALID_ACTION_V2.fullmatch(action_id) is None:
        raise ValueError(f"invalid action id {_quote(action_id)}")
    return ActionTag(action_id)


def is_valid_action(action_id: str) -> bool:
    """Report whether action_id is a valid action id."""
    return (
        is_valid_uuid_string(action_id)
        or _VALID_ACTION_V2.fullmatch(action_id) is not None
    )


@dataclass(frozen=True)
class OperationTag(Tag):
    """Tag naming an operation by number."""

    operation_id: str = ""

    def kind(self) -> str:
        return OPERATION_TAG_KIND

    def id(self) -> str:
        return self.operation_id


def new_operation_tag(operation_id: str) -> OperationTag:
    """Return the tag of an operation, raising ValueError if the id is invalid."""
    if not is_valid_operation(operation_id):
        raise ValueError(f"invalid operation id {_quote(operation_id)}")
    return OperationTag(operation_id)


def is_valid_operation(operation_id: str) -> bool:
    """Report whether operation_id is a valid operation id."""
    return _VALID_OPERATION.fullmatch(operation_id) is not None