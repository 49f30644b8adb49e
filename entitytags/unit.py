"""Unit names and tags."""

from __future__ import annotations

import re
import zlib
from dataclasses import dataclass

from entitytags.application import APPLICATION_SNIPPET
from entitytags.base import NUMBER_SNIPPET, Tag, _quote

UNIT_TAG_KIND = "unit"

# Minimum size of a shortened unit tag string.
_MIN_SHORTENED_LENGTH = 21

UNIT_SNIPPET = "(" + APPLICATION_SNIPPET + ")/(" + NUMBER_SNIPPET + ")"

_VALID_UNIT = re.compile(UNIT_SNIPPET)


def is_valid_unit(name: str) -> bool:
    """Report whether name is a valid unit name."""
    return _VALID_UNIT.fullmatch(name) is not None


def _unit_suffix_to_id(suffix: str) -> str:
    # Only the last "-" separates the number; application names may hold hyphens.
    index = suffix.rfind("-")
    if index > 0:
        return suffix[:index] + "/" + suffix[index + 1 :]
    return suffix


def _match_unit(unit_name: str) -> re.Match[str]:
    match = _VALID_UNIT.fullmatch(unit_name)
    if match is None:
        raise ValueError(f"{_quote(unit_name)} is not a valid unit name")
    return match


@dataclass(frozen=True)
class UnitTag(Tag):
    """Tag naming a unit; ``suffix`` is the name with the last "/" as "-"."""

    suffix: str = ""

    def kind(self) -> str:
        return UNIT_TAG_KIND

    def id(self) -> str:
        return _unit_suffix_to_id(self.suffix)

    def __str__(self) -> str:
        return f"{UNIT_TAG_KIND}-{self.suffix}"

    def number(self) -> int:
        """Return the unit number, or 0 if there is none."""
        index = self.suffix.rfind("-")
        if index > 0:
            try:
                return int(self.suffix[index + 1 :])
            except ValueError:
                return 0
        return 0

    def shortened_string(self, max_length: int) -> str:
        """Return the tag string limited to max_length, hashing a long name."""
        if max_length < _MIN_SHORTENED_LENGTH:
            raise ValueError(
                f"max length must be at least {_MIN_SHORTENED_LENGTH}, not {max_length}"
            )
        index = self.suffix.rfind("-")
        if index <= 0:
            raise ValueError(f"invalid tag {self.suffix}")
        name, unit_id = self.suffix[:index], self.suffix[index + 1 :]
        # Reserve at least 4 characters for the id so names line up across units.
        id_length = max(len(unit_id), 4)
        # 8 for the hash, 2 for the two dashes.
        max_name_length = max_length - id_length - len(UNIT_TAG_KIND) - 8 - 2
        hash_string = ""
        if len(name) > max_name_length:
            if max_name_length < 0:
                raise ValueError(
                    f"max length {max_length} is too short for unit number {unit_id}"
                )
            hash_string = f"{zlib.crc32(name.encode('utf-8')) & 0xFFFFFFFF:08x}"
            name = name[:max_name_length]
        return f"{UNIT_TAG_KIND}-{name}{hash_string}-{unit_id}"


def new_unit_tag(unit_name: str) -> UnitTag:
    """Return the tag for the named unit, raising ValueError if it is invalid."""
    index = unit_name.rfind("/")
    if index <= 0 or not is_valid_unit(unit_name):
        raise ValueError(f"{_quote(unit_name)} is not a valid unit name")
    return UnitTag(unit_name[:index] + "-" + unit_name[index + 1 :])


def unit_application(unit_name: str) -> str:
    """Return the application name of a unit."""
    return _match_unit(unit_name).group(1)


def unit_number(unit_name: str) -> int:
    """Return the number of a unit within its application."""
    return int(_match_unit(unit_name).group(2))