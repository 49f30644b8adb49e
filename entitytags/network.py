"""IP address, space and subnet tags."""

from __future__ import annotations

import re
from dataclasses import dataclass

from entitytags.base import (
    NUMBER_SNIPPET,
    Tag,
    _quote,
    is_valid_uuid_string,
    uuid_from_string,
)

IP_ADDRESS_TAG_KIND = "ipaddress"
SPACE_TAG_KIND = "space"
SUBNET_TAG_KIND = "subnet"

SPACE_SNIPPET = "(?:[a-z0-9]+(?:-[a-z0-9]+)*)"

_VALID_SPACE = re.compile(SPACE_SNIPPET)
_VALID_SUBNET = re.compile(NUMBER_SNIPPET)


def is_valid_ip_address(address_id: str) -> bool:
    """Report whether address_id is a valid IP address id (a UUID)."""
    return is_valid_uuid_string(address_id)


@dataclass(frozen=True)
class IPAddressTag(Tag):
    """Tag naming an IP address by UUID."""

    address_id: str = ""

    def kind(self) -> str:
        return IP_ADDRESS_TAG_KIND

    def id(self) -> str:
        return self.address_id


def new_ip_address_tag(address_id: str) -> IPAddressTag:
    """Return the tag for the IP address with the given UUID."""
    return IPAddressTag(str(uuid_from_string(address_id)))


def is_valid_space(name: str) -> bool:
    """Report whether name is a valid space name."""
    return _VALID_SPACE.fullmatch(name) is not None


@dataclass(frozen=True)
class SpaceTag(Tag):
    """Tag naming a network space."""

    name: str = ""

    def kind(self) -> str:
        return SPACE_TAG_KIND

    def id(self) -> str:
        return self.name


def new_space_tag(name: str) -> SpaceTag:
    """Return the tag of the named space, raising ValueError if invalid."""
    if not is_valid_space(name):
        raise ValueError(f"{_quote(name)} is not a valid space name")
    return SpaceTag(name)


def is_valid_subnet(subnet_id: str) -> bool:
    """Report whether subnet_id is a valid subnet id."""
    return _VALID_SUBNET.fullmatch(subnet_id) is not None


@dataclass(frozen=True)
class SubnetTag(Tag):
    """Tag naming a subnet by number."""

    subnet_id: str = ""

    def kind(self) -> str:
        return SUBNET_TAG_KIND

    def id(self) -> str:
        return self.subnet_id


def new_subnet_tag(subnet_id: str) -> SubnetTag:
    """Return the tag of the subnet, raising ValueError if the id is invalid."""
    if not is_valid_subnet(subnet_id):
        raise ValueError(f"{subnet_id} is not a valid subnet ID")
    return SubnetTag(subnet_id)