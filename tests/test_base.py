import re
import uuid

import pytest

from entitytags.application import APPLICATION_SNIPPET
from entitytags.base import (
    NUMBER_SNIPPET,
    InvalidTagError,
    invalid_tag_error,
    is_valid_uuid_string,
    readable_string,
    uuid_from_string,
)
from entitytags.machine import (
    CONTAINER_SNIPPET,
    CONTAINER_TYPE_SNIPPET,
    MACHINE_SNIPPET,
    new_machine_tag,
)
from entitytags.unit import new_unit_tag


@pytest.mark.parametrize(
    "tag, expected",
    [
        (None, ""),
        (new_machine_tag("0"), "machine 0"),
        (new_unit_tag("wordpress/2"), "unit wordpress/2"),
    ],
)
def test_readable_string(tag, expected):
    assert readable_string(tag) == expected


def test_invalid_tag_error_without_kind():
    err = invalid_tag_error("foo", "")
    assert isinstance(err, InvalidTagError)
    assert str(err) == '"foo" is not a valid tag'


def test_invalid_tag_error_with_kind():
    err = invalid_tag_error("machine-#", "machine")
    assert str(err) == '"machine-#" is not a valid machine tag'
    assert err.tag == "machine-#"
    assert err.kind == "machine"


def test_invalid_tag_error_empty():
    assert str(invalid_tag_error("", "")) == '"" is not a valid tag'


def test_invalid_tag_error_escapes_quotes():
    assert str(invalid_tag_error('a"b', "unit")) == '"a\\"b" is not a valid unit tag'


def test_invalid_tag_error_is_value_error():
    err = invalid_tag_error("x", "")
    assert isinstance(err, ValueError)
    assert str(err) == '"x" is not a valid tag'
    assert (err.tag, err.kind) == ("x", "")


@pytest.mark.parametrize(
    "value, expected",
    [
        ("f47ac10b-58cc-4372-a567-0e02b2c3d479", True),
        ("42424242-1111-2222-3333-0123456789ab", True),
        ("00000000-abcd", False),
        ("012345678", False),
        ("42", False),
        ("", False),
        ("F47AC10B-58CC-4372-A567-0E02B2C3D479", False),
        ("xf47ac10b-58cc-4372-a567-0e02b2c3d479", False),
    ],
)
def test_is_valid_uuid_string(value, expected):
    assert is_valid_uuid_string(value) is expected


def test_uuid_from_string_round_trip():
    text = "42424242-1111-2222-3333-0123456789ab"
    parsed = uuid_from_string(text)
    assert parsed == uuid.UUID(text)
    assert str(parsed) == text


def test_uuid_from_string_invalid():
    with pytest.raises(ValueError, match=re.escape('invalid UUID: "42"')):
        uuid_from_string("42")


@pytest.mark.parametrize(
    "snippet, sample",
    [
        (CONTAINER_TYPE_SNIPPET, "lxc"),
        (CONTAINER_SNIPPET, "/lxc/0"),
        (MACHINE_SNIPPET, "6/lxc/42/kvm/0"),
        (NUMBER_SNIPPET, "42"),
        (APPLICATION_SNIPPET, "rabbitmq-server"),
    ],
)
def test_snippets_contain_no_capturing_groups(snippet, sample):
    compiled = re.compile(snippet)
    assert compiled.groups == 0
    match = compiled.fullmatch(sample)
    assert match is not None
    assert match.groups() == ()