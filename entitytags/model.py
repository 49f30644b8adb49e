"""Model, environment, CAAS model, controller and controller agent tags."""

from __future__ import annotations

import re
from dataclasses import dataclass

from entitytags.base import NUMBER_SNIPPET, Tag, _quote

MODEL_TAG_KIND = "model"
ENVIRON_TAG_KIND = "environment"
CAAS_MODEL_TAG_KIND = "caasmodel"
CONTROLLER_TAG_KIND = "controller"
CONTROLLER_AGENT_TAG_KIND = "controller"

_SHORT_MODEL_ID_LENGTH = 6

# Searched for anywhere in the value, not anchored.
_VALID_UUID = re.compile(
    r"[a-f0-9]{8}-[a-f0-9]{4}-[a-f0-9]{4}-[a-f0-9]{4}-[a-f0-9]{12}"
)
# Lowercase letters, digits and non-leading hyphens.
_VALID_MODEL_NAME = re.compile(r"[a-z0-9]+[a-z0-9-]*")
_VALID_CONTROLLER_NAME = re.compile(r"[a-z0-9]+[a-z0-9-]*")
_VALID_CONTROLLER_AGENT_ID = re.compile(NUMBER_SNIPPET)
_DECIMAL_INTEGER = re.compile(r"[+-]?[0-9]+")
_INT64_MIN, _INT64_MAX = -(2**63), 2**63 - 1


def _atoi(text: str) -> int | None:
    """Parse a signed decimal 64-bit integer, or return None."""
    if _DECIMAL_INTEGER.fullmatch(text) is None:
        return None
    value = int(text)
    if not _INT64_MIN <= value <= _INT64_MAX:
        return None
    return value


@dataclass(frozen=True)
class ModelTag(Tag):
    """Tag naming a model by UUID."""

    uuid: str = ""

    def kind(self) -> str:
        return MODEL_TAG_KIND

    def id(self) -> str:
        return self.uuid

    def short_id(self) -> str:
        """Return the first characters of the UUID."""
        return self.uuid[:_SHORT_MODEL_ID_LENGTH]


def new_model_tag(uuid: str) -> ModelTag:
    """Return the tag of the model with the given UUID."""
    return ModelTag(uuid)


def is_valid_model(model_id: str) -> bool:
    """Report whether model_id is a valid model UUID."""
    return _VALID_UUID.search(model_id) is not None


def is_valid_model_name(name: str) -> bool:
    """Report whether name is safe for a model name."""
    return _VALID_MODEL_NAME.fullmatch(name) is not None


@dataclass(frozen=True)
class EnvironTag(Tag):
    """Deprecated tag naming an environment; model tags replace it."""

    uuid: str = ""

    def kind(self) -> str:
        return ENVIRON_TAG_KIND

    def id(self) -> str:
        return self.uuid


def new_environ_tag(uuid: str) -> EnvironTag:
    """Return the tag of the environment with the given UUID."""
    return EnvironTag(uuid)


def is_valid_environment(environ_id: str) -> bool:
    """Report whether environ_id is a valid environment UUID."""
    return _VALID_UUID.search(environ_id) is not None


@dataclass(frozen=True)
class CAASModelTag(Tag):
    """Tag naming a CAAS model by UUID."""

    uuid: str = ""

    def kind(self) -> str:
        return CAAS_MODEL_TAG_KIND

    def id(self) -> str:
        return self.uuid


def new_caas_model_tag(uuid: str) -> CAASModelTag:
    """Return the tag of the CAAS model with the given UUID."""
    return CAASModelTag(uuid)


def is_valid_caas_model(model_id: str) -> bool:
    """Report whether model_id is a valid CAAS model UUID."""
    return _VALID_UUID.search(model_id) is not None


def is_valid_caas_model_name(name: str) -> bool:
    """Report whether name is safe for a CAAS model name."""
    return _VALID_MODEL_NAME.fullmatch(name) is not None


@dataclass(frozen=True)
class ControllerTag(Tag):
    """Tag naming a controller by UUID."""

    uuid: str = ""

    def kind(self) -> str:
        return CONTROLLER_TAG_KIND

    def id(self) -> str:
        return self.uuid


def new_controller_tag(uuid: str) -> ControllerTag:
    """Return the tag of the controller with the given UUID."""
    return ControllerTag(uuid)


def is_valid_controller(controller_id: str) -> bool:
    """Report whether controller_id is a valid controller UUID."""
    return _VALID_UUID.search(controller_id) is not None


def is_valid_controller_name(name: str) -> bool:
    """Report whether name is safe for a controller name."""
    return _VALID_CONTROLLER_NAME.fullmatch(name) is not None


@dataclass(frozen=True)
class ControllerAgentTag(Tag):
    """Tag naming a controller agent by number."""

    agent_id: str = ""

    def kind(self) -> str:
        return CONTROLLER_AGENT_TAG_KIND

    def id(self) -> str:
        return self.agent_id

    def number(self) -> int:
        """Return the agent number, or 0 if the id is not a number."""
        value = _atoi(self.agent_id)
        return 0 if value is None else value


def new_controller_agent_tag(agent_id: str) -> ControllerAgentTag:
    """Return the tag of the controller agent, raising ValueError if invalid."""
    if _atoi(agent_id) is None:
        raise ValueError(f"{_quote(agent_id)} is not a valid controller agent id")
    return ControllerAgentTag(agent_id)


def is_valid_controller_agent(agent_id: str) -> bool:
    """Report whether agent_id is a valid controller agent id."""
    return _VALID_CONTROLLER_AGENT_ID.fullmatch(agent_id) is not None