import itertools
import re

import pytest

from entitytags.relation import RelationTag, is_valid_relation, new_relation_tag

RELATION_NAME_TESTS = [
    ("", False),
    ("0foo", False),
    ("foo", True),
    ("f1-boo", True),
    ("f-o-o", True),
    ("-foo", False),
    ("fo#o", False),
    ("foo-42", True),
    ("FooBar", False),
    ("foo42-bar1", True),
    ("42", False),
    ("0", False),
    ("%not", False),
    ("42also-not", False),
    ("042", False),
    ("0x42", False),
    ("foo_42", True),
    ("_foo", False),
    ("!foo", False),
    ("foo_bar-baz_boo", True),
    ("foo bar", False),
    ("foo-_", False),
    ("foo-", False),
    ("foo_-a", False),
    ("foo_", False),
]

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


@pytest.mark.parametrize(
    "relation, application",
    list(itertools.product(RELATION_NAME_TESTS, APPLICATION_NAME_TESTS)),
)
def test_relation_key_formats(relation, application):
    rel_name, rel_valid = relation
    app_name, app_valid = application
    peer_key = app_name + ":" + rel_name
    key = peer_key + " " + peer_key
    expected = rel_valid and app_valid
    assert is_valid_relation(key) is expected
    assert is_valid_relation(peer_key) is expected


def test_new_relation_tag_peer():
    tag = new_relation_tag("wordpress:haproxy")
    assert tag == RelationTag("wordpress.haproxy")
    assert str(tag) == "relation-wordpress.haproxy"
    assert tag.id() == "wordpress:haproxy"
    assert tag.kind() == "relation"


def test_new_relation_tag_pair():
    tag = new_relation_tag("wordpress:db mysql:db")
    assert str(tag) == "relation-wordpress.db#mysql.db"
    assert tag.id() == "wordpress:db mysql:db"


def test_relation_suffix_to_key():
    tag = RelationTag("my-svc1.myrel1#other-svc.other-rel2")
    assert tag.id() == "my-svc1:myrel1 other-svc:other-rel2"
    assert new_relation_tag(tag.id()) == tag
    assert RelationTag("riak.ring").id() == "riak:ring"


@pytest.mark.parametrize("key", ["", "dave", "wordpress", "wordpress:db mysql"])
def test_new_relation_tag_invalid(key):
    with pytest.raises(ValueError, match=re.escape(f'"{key}" is not a valid relation key')):
        new_relation_tag(key)