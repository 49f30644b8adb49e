"""Storage instance, filesystem and volume ids and tags."""

from __future__ import annotations

import re
from dataclasses import dataclass

from entitytags.base import NUMBER_SNIPPET, Tag, _quote
from entitytags.machine import (
    MACHINE_SNIPPET,
    MachineTag,
    is_valid_machine,
    new_machine_tag,
)
from entitytags.unit import UNIT_SNIPPET, UnitTag, is_valid_unit, new_unit_tag

STORAGE_TAG_KIND = "storage"
FILESYSTEM_TAG_KIND = "filesystem"
VOLUME_TAG_KIND = "volume"

# Valid storage names, without the storage instance sequence number.
STORAGE_NAME_SNIPPET = "(?:[a-z][a-z0-9]*(?:-[a-z0-9]*[a-z][a-z0-9]*)*)"

_VALID_STORAGE = re.compile("(" + STORAGE_NAME_SNIPPET + ")/" + NUMBER_SNIPPET)

# Filesystems and volumes may be bound to a machine or unit; that is
# encoded in the id.
_VALID_FILESYSTEM = re.compile(
    "((" + MACHINE_SNIPPET + "|" + UNIT_SNIPPET + ")/)?" + NUMBER_SNIPPET
)
_VALID_VOLUME = re.compile(
    "((" + MACHINE_SNIPPET + "|" + UNIT_SNIPPET + ")/)?" + NUMBER_SNIPPET
)
_MACHINE_SUFFIX_PREFIX = re.compile("(" + MACHINE_SNIPPET + "-)")


def _replace_last(text: str, old: str, new: str) -> str:
    index = text.rfind(old)
    if index > 0:
        return text[:index] + new + text[index + 1 :]
    return text


def _storage_suffix_to_id(suffix: str) -> str:
    # Storage names may contain hyphens, so only the last one is a separator.
    return _replace_last(suffix, "-", "/")


def _filesystem_or_volume_suffix_to_id(suffix: str) -> str:
    if _MACHINE_SUFFIX_PREFIX.match(suffix):
        return suffix.replace("-", "/")
    # Unit names may contain hyphens, so only the last two are separators.
    for _ in range(2):
        suffix = _replace_last(suffix, "-", "/")
    return suffix


def is_valid_storage(storage_id: str) -> bool:
    """Report whether storage_id is a valid storage instance id."""
    return _VALID_STORAGE.fullmatch(storage_id) is not None


@dataclass(frozen=True)
class StorageTag(Tag):
    """Tag naming a storage instance; ``suffix`` has the last "/" as "-"."""

    suffix: str = ""

    def kind(self) -> str:
        return STORAGE_TAG_KIND

    def id(self) -> str:
        return _storage_suffix_to_id(self.suffix)

    def __str__(self) -> str:
        return f"{STORAGE_TAG_KIND}-{self.suffix}"


def new_storage_tag(storage_id: str) -> StorageTag:
    """Return the tag for a storage instance, raising ValueError if invalid."""
    index = storage_id.rfind("/")
    if index <= 0 or not is_valid_storage(storage_id):
        raise ValueError(f"{_quote(storage_id)} is not a valid storage instance ID")
    return StorageTag(storage_id[:index] + "-" + storage_id[index + 1 :])


def storage_name(storage_id: str) -> str:
    """Return the storage name part of a storage instance id."""
    match = _VALID_STORAGE.fullmatch(storage_id)
    if match is None:
        raise ValueError(f"{_quote(storage_id)} is not a valid storage instance ID")
    return match.group(1)


def is_valid_filesystem(filesystem_id: str) -> bool:
    """Report whether filesystem_id is a valid filesystem id."""
    return _VALID_FILESYSTEM.fullmatch(filesystem_id) is not None


@dataclass(frozen=True)
class FilesystemTag(Tag):
    """Tag naming a filesystem; ``suffix`` is the id with "/" as "-"."""

    suffix: str = ""

    def kind(self) -> str:
        return FILESYSTEM_TAG_KIND

    def id(self) -> str:
        return _filesystem_or_volume_suffix_to_id(self.suffix)

    def __str__(self) -> str:
        return f"{FILESYSTEM_TAG_KIND}-{self.suffix}"


def new_filesystem_tag(filesystem_id: str) -> FilesystemTag:
    """Return the tag for a filesystem, raising ValueError if invalid."""
    if not is_valid_filesystem(filesystem_id):
        raise ValueError(f"{_quote(filesystem_id)} is not a valid filesystem id")
    return FilesystemTag(filesystem_id.replace("/", "-"))


def _owner_id(tag: Tag) -> str | None:
    tag_id = tag.id()
    index = tag_id.rfind("/")
    if index == -1:
        return None
    return tag_id[:index]


def _machine_of(tag: Tag) -> MachineTag | None:
    owner = _owner_id(tag)
    if owner is None or not is_valid_machine(owner):
        return None
    return new_machine_tag(owner)


def _unit_of(tag: Tag) -> UnitTag | None:
    owner = _owner_id(tag)
    if owner is None or not is_valid_unit(owner):
        return None
    return new_unit_tag(owner)


def filesystem_machine(tag: FilesystemTag) -> MachineTag | None:
    """Return the machine the filesystem is bound to, or None."""
    return _machine_of(tag)


def filesystem_unit(tag: FilesystemTag) -> UnitTag | None:
    """Return the unit the filesystem is bound to, or None."""
    return _unit_of(tag)


def is_valid_volume(volume_id: str) -> bool:
    """Report whether volume_id is a valid volume id."""
    return _VALID_VOLUME.fullmatch(volume_id) is not None


@dataclass(frozen=True)
class VolumeTag(Tag):
    """Tag naming a volume; ``suffix`` is the id with "/" as "-"."""

    suffix: str = ""

    def kind(self) -> str:
        return VOLUME_TAG_KIND

    def id(self) -> str:
        return _filesystem_or_volume_suffix_to_id(self.suffix)

    def __str__(self) -> str:
        return f"{VOLUME_TAG_KIND}-{self.suffix}"


def new_volume_tag(volume_id: str) -> VolumeTag:
    """Return the tag for a volume, raising ValueError if invalid."""
    if not is_valid_volume(volume_id):
        raise ValueError(f"{_quote(volume_id)} is not a valid volume ID")
    return VolumeTag(volume_id.replace("/", "-"))


def volume_machine(tag: VolumeTag) -> MachineTag | None:
    """Return the machine the volume is bound to, or None."""
    return _machine_of(tag)


def volume_unit(tag: VolumeTag) -> UnitTag | None:
    """Return the unit the volume is bound to, or None."""
    return _unit_of(tag)