import pytest

from entitytags.model import (
    CAASModelTag,
    ControllerAgentTag,
    ControllerTag,
    EnvironTag,
    ModelTag,
    is_valid_caas_model,
    is_valid_caas_model_name,
    is_valid_controller,
    is_valid_controller_agent,
    is_valid_controller_name,
    is_valid_environment,
    is_valid_model,
    is_valid_model_name,
    new_caas_model_tag,
    new_controller_agent_tag,
    new_controller_tag,
    new_environ_tag,
    new_model_tag,
)

UUID = "f47ac10b-58cc-4372-a567-0e02b2c3d479"

NAME_CASES = [
    ("foo-bar", True),
    ("foo bar", False),
    ("fooBar", False),
    ("foo@bar", False),
]


def test_model_tag():
    tag = new_model_tag(UUID)
    assert str(tag) == f"model-{UUID}"
    assert tag.kind() == "model"
    assert tag.id() == UUID
    assert tag.short_id() == "f47ac1"
    assert tag == ModelTag(UUID)


@pytest.mark.parametrize(
    "func",
    [is_valid_model, is_valid_environment, is_valid_caas_model, is_valid_controller],
)
def test_uuid_validity(func):
    assert func(UUID) is True
    assert func("/") is False
    assert func("") is False
    assert func("dave") is False


@pytest.mark.parametrize("name, expected", NAME_CASES)
def test_model_name(name, expected):
    assert is_valid_model_name(name) is expected


@pytest.mark.parametrize("name, expected", NAME_CASES)
def test_caas_model_name(name, expected):
    assert is_valid_caas_model_name(name) is expected


@pytest.mark.parametrize("name, expected", NAME_CASES)
def test_controller_name(name, expected):
    assert is_valid_controller_name(name) is expected


def test_environ_tag():
    tag = new_environ_tag("deadbeef-0123-4567-89ab-feedfacebeef")
    assert tag == EnvironTag("deadbeef-0123-4567-89ab-feedfacebeef")
    assert str(tag) == "environment-deadbeef-0123-4567-89ab-feedfacebeef"
    assert tag.kind() == "environment"


def test_caas_model_tag():
    tag = new_caas_model_tag(UUID)
    assert tag == CAASModelTag(UUID)
    assert str(tag) == f"caasmodel-{UUID}"
    assert tag.id() == UUID


def test_controller_tag():
    tag = new_controller_tag(UUID)
    assert tag == ControllerTag(UUID)
    assert str(tag) == f"controller-{UUID}"
    assert tag.kind() == "controller"


def test_controller_agent_tag():
    assert str(new_controller_agent_tag("123")) == "controller-123"
    assert new_controller_agent_tag("1") == ControllerAgentTag("1")


def test_controller_agent_id_formats():
    assert is_valid_controller_agent("123") is True
    assert is_valid_controller_agent("-123") is False
    assert is_valid_controller_agent("invalid") is False


def test_controller_agent_number():
    assert ControllerAgentTag().number() == 0
    assert new_controller_agent_tag("5").number() == 5


def test_controller_agent_invalid():
    with pytest.raises(ValueError, match='"dave" is not a valid controller agent id'):
        new_controller_agent_tag("dave")