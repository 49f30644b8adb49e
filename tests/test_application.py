import re

import pytest

from entitytags.application import (
    ApplicationOfferTag,
    ApplicationTag,
    is_valid_application,
    is_valid_application_offer,
    new_application_offer_tag,
    new_application_tag,
    validate_application_name,
)
from entitytags.unit import is_valid_unit

APPLICATION_NAME_TESTS = [
    ("", False),
    ("wordpress", True),
    ("foo42", True),
    ("doing55in54", True),
    ("%not", False),
    ("42also-not", False),
    ("but-this-works", True),
    ("so-42-far-not-good", False),
    ("foo/42", False),
    ("is-it-", False),
    ("broken2-", False),
    ("foo2", True),
    ("foo-2", False),
]


@pytest.mark.parametrize("pattern, valid", APPLICATION_NAME_TESTS)
def test_application_name_formats(pattern, valid):
    assert is_valid_application(pattern) is valid
    assert is_valid_unit(pattern + "/0") is valid
    assert is_valid_unit(pattern + "/99") is valid
    assert is_valid_unit(pattern + "/-1") is False
    assert is_valid_unit(pattern + "/blah") is False
    assert is_valid_unit(pattern + "/") is False


@pytest.mark.parametrize("pattern, valid", APPLICATION_NAME_TESTS)
def test_application_offer_name_formats(pattern, valid):
    assert is_valid_application_offer(pattern) is valid


@pytest.mark.parametrize(
    "name, message",
    [
        (
            "application-1",
            'invalid application name "application-1", '
            "unexpected number(s) found after last hyphen",
        ),
        (
            "Application",
            'invalid application name "Application", unexpected uppercase character',
        ),
        (
            "app£name",
            'invalid application name "app£name", unexpected character £',
        ),
    ],
)
def test_validate_application_name_errors(name, message):
    with pytest.raises(ValueError) as excinfo:
        validate_application_name(name)
    assert str(excinfo.value) == message


def test_validate_application_name_generic_error():
    with pytest.raises(ValueError, match=re.escape('invalid application name "-foo"')):
        validate_application_name("-foo")


def test_validate_application_name_valid():
    assert validate_application_name("wordpress") is None


def test_application_tag_equality():
    assert new_application_tag("ceph") == ApplicationTag("ceph")


def test_application_tag_parts():
    tag = new_application_tag("dave")
    assert tag.kind() == "application"
    assert tag.id() == "dave"
    assert str(tag) == "application-dave"


def test_application_offer_tag_parts():
    tag = new_application_offer_tag("hosted-mysql")
    assert tag == ApplicationOfferTag("hosted-mysql")
    assert tag.kind() == "applicationoffer"
    assert tag.id() == "hosted-mysql"
    assert str(tag) == "applicationoffer-hosted-mysql"


def test_application_and_offer_tags_differ():
    assert new_application_tag("dave") != new_application_offer_tag("dave")
    assert len({new_application_tag("dave"), ApplicationTag("dave")}) == 1