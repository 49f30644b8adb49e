import re

import pytest

from entitytags.charm import CharmTag, is_valid_charm, new_charm_tag

VALID_CHARM_URLS = """
charm
local:charm local:charm--1 local:charm-1
local:series/charm local:series/charm-3 local:series/charm-0
cs:~user/charm cs:~user/charm-1 cs:~user/series/charm cs:~user/series/charm-1
cs:series/charm cs:series/charm-with-long-name cs:series/charm-3 cs:series/charm-0
cs:charm cs:charm--1 cs:charm-1
charm charm-1 series/charm series/charm-1
local:charm-with-long2-name/series/2 local:charm-with-long2-name/series
local:charm-with-long2-name/2
cs:user/charm-with-long-name/series/2 cs:charm-with-long2-name/series/2
cs:user/charm-with-long-name/2 cs:user/charm-with-long-name/series
cs:charm-with-long-name/2 cs:charm-with-long-name/series cs:user/charm-with-long-name
user/charm-with-long-name/series/2 charm-with-long2-name/series/2
user/charm-with-long-name/2 user/charm-with-long-name/series
charm-with-long-name/2 charm-with-long-name/series user/charm-with-long-name
""".split()

INVALID_CHARM_URLS = [""] + """
local:~user/charm local:~user/series/charm local:~user/series/charm-1
local:charm--2 blah:charm-2 local:series/charm-01 local:user/name/series/2
""".split()


@pytest.mark.parametrize("url", VALID_CHARM_URLS)
def test_valid_charm_urls(url):
    assert is_valid_charm(url) is True


@pytest.mark.parametrize("url", INVALID_CHARM_URLS)
def test_invalid_charm_urls(url):
    assert is_valid_charm(url) is False


@pytest.mark.parametrize("url", VALID_CHARM_URLS)
def test_new_charm_tag_string_and_id(url):
    tag = new_charm_tag(url)
    assert str(tag) == "charm-" + url
    assert tag.id() == url
    assert tag.kind() == "charm"
    assert tag == CharmTag(url)


@pytest.mark.parametrize("url", INVALID_CHARM_URLS)
def test_new_charm_tag_invalid_raises(url):
    with pytest.raises(ValueError, match=re.escape(f'"{url}" is not a valid charm name')):
        new_charm_tag(url)


def test_trailing_newline_is_not_valid():
    assert is_valid_charm("charm\n") is False