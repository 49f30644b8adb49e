"""An unordered collection of unique tags."""

from __future__ import annotations

from typing import Iterable, Iterator

from entitytags.base import Tag
from entitytags.parse import parse_tag


class TagSet:
    """A set of tags with the usual set operations."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, *args: Tag) -> None:
        self._tags: set[Tag] = set()
        for value in args:
            self.add(value)

    @classmethod
    def _from_tags(cls, tags: Iterable[Tag]) -> TagSet:
        result = cls()
        result._tags = set(tags)
        return result

    def __len__(self) -> int:
        return len(self._tags)

    def __iter__(self) -> Iterator[Tag]:
        return iter(self._tags)

    def __contains__(self, value: object) -> bool:
        return value in self._tags

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TagSet):
            return NotImplemented
        return self._tags == other._tags

    def __repr__(self) -> str:
        items = ", ".join(repr(str(tag)) for tag in self.sorted_values())
        return f"TagSet({items})"

    def is_empty(self) -> bool:
        """Report whether the set holds no tags."""
        return not self._tags

    def add(self, value: Tag) -> None:
        """Put a tag into the set."""
        if not isinstance(value, Tag):
            raise TypeError(f"expected a Tag, not {type(value).__name__}")
        self._tags.add(value)

    def remove(self, value: Tag) -> None:
        """Take a tag out of the set; absent tags are ignored."""
        self._tags.discard(value)

    def values(self) -> list[Tag]:
        """Return the tags in no particular order."""
        return list(self._tags)

    def sorted_values(self) -> list[Tag]:
        """Return the tags ordered by their string form."""
        return sorted(self._tags, key=str)

    def union(self, other: TagSet) -> TagSet:
        """Return a new set with the tags of both sets."""
        return TagSet._from_tags(self._tags | other._tags)

    def intersection(self, other: TagSet) -> TagSet:
        """Return a new set with the tags present in both sets."""
        return TagSet._from_tags(self._tags & other._tags)

    def difference(self, other: TagSet) -> TagSet:
        """Return a new set with the tags of this set that are not in other."""
        return TagSet._from_tags(self._tags - other._tags)

    __or__ = union
    __and__ = intersection
    __sub__ = difference


def new_set_from_strings(*args: str) -> TagSet:
    """Build a set by parsing each tag string; raises InvalidTagError on a bad one."""
    return TagSet(*(parse_tag(value) for value in args))