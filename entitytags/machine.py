"""Machine ids and tags, including nested containers."""

from __future__ import annotations

import re
from dataclasses import dataclass

from entitytags.base import NUMBER_SNIPPET, Tag

MACHINE_TAG_KIND = "machine"

CONTAINER_TYPE_SNIPPET = "[a-z]+"
CONTAINER_SNIPPET = "/" + CONTAINER_TYPE_SNIPPET + "/" + NUMBER_SNIPPET
MACHINE_SNIPPET = NUMBER_SNIPPET + "(?:" + CONTAINER_SNIPPET + ")*"

_VALID_MACHINE = re.compile(MACHINE_SNIPPET)


def is_valid_machine(machine_id: str) -> bool:
    """Report whether machine_id is a valid machine id."""
    return _VALID_MACHINE.fullmatch(machine_id) is not None


def is_container_machine(machine_id: str) -> bool:
    """Report whether machine_id is a valid container machine id."""
    return is_valid_machine(machine_id) and "/" in machine_id


def _machine_suffix_to_id(suffix: str) -> str:
    return suffix.replace("-", "/")


@dataclass(frozen=True)
class MachineTag(Tag):
    """Tag naming a machine; ``suffix`` is the id with "/" replaced by "-"."""

    suffix: str = ""

    def kind(self) -> str:
        return MACHINE_TAG_KIND

    def id(self) -> str:
        return _machine_suffix_to_id(self.suffix)

    def __str__(self) -> str:
        return f"{MACHINE_TAG_KIND}-{self.suffix}"

    def parent(self) -> MachineTag | None:
        """Return the host machine's tag for a container, otherwise None."""
        parts = self.suffix.split("-")
        if len(parts) < 3:
            return None
        return MachineTag("-".join(parts[:-2]))

    def container_type(self) -> str:
        """Return the container type, or "" if the machine is not a container."""
        parts = self.suffix.split("-")
        if len(parts) < 3:
            return ""
        return parts[-2]

    def child_id(self) -> str:
        """Return the last segment of the id."""
        return self.suffix.split("-")[-1]


def new_machine_tag(machine_id: str) -> MachineTag:
    """Return the tag for the machine with the given id."""
    return MachineTag(machine_id.replace("/", "-"))