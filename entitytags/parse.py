"""Parsing tag strings back into tags of every kind."""

from __future__ import annotations

from typing import Callable, TypeVar

from entitytags.action import (
    ACTION_TAG_KIND,
    OPERATION_TAG_KIND,
    ActionTag,
    OperationTag,
    is_valid_action,
    is_valid_operation,
    new_action_tag,
    new_operation_tag,
)
from entitytags.application import (
    APPLICATION_OFFER_TAG_KIND,
    APPLICATION_TAG_KIND,
    ApplicationOfferTag,
    ApplicationTag,
    is_valid_application,
    is_valid_application_offer,
    new_application_offer_tag,
    new_application_tag,
)
from entitytags.base import InvalidTagError, Tag, _quote, uuid_from_string
from entitytags.charm import CHARM_TAG_KIND, CharmTag, is_valid_charm, new_charm_tag
from entitytags.cloud import (
    CLOUD_CREDENTIAL_TAG_KIND,
    CLOUD_TAG_KIND,
    CloudCredentialTag,
    CloudTag,
    _cloud_credential_suffix_to_id,
    is_valid_cloud,
    is_valid_cloud_credential,
    new_cloud_credential_tag,
    new_cloud_tag,
)
from entitytags.machine import (
    MACHINE_TAG_KIND,
    MachineTag,
    _machine_suffix_to_id,
    is_valid_machine,
    new_machine_tag,
)
from entitytags.model import (
    CAAS_MODEL_TAG_KIND,
    CONTROLLER_AGENT_TAG_KIND,
    CONTROLLER_TAG_KIND,
    ENVIRON_TAG_KIND,
    MODEL_TAG_KIND,
    CAASModelTag,
    ControllerAgentTag,
    ControllerTag,
    EnvironTag,
    ModelTag,
    is_valid_caas_model,
    is_valid_controller,
    is_valid_controller_agent,
    is_valid_environment,
    is_valid_model,
    new_caas_model_tag,
    new_controller_agent_tag,
    new_controller_tag,
    new_environ_tag,
    new_model_tag,
)
from entitytags.network import (
    IP_ADDRESS_TAG_KIND,
    SPACE_TAG_KIND,
    SUBNET_TAG_KIND,
    IPAddressTag,
    SpaceTag,
    SubnetTag,
    is_valid_space,
    is_valid_subnet,
    new_ip_address_tag,
    new_space_tag,
    new_subnet_tag,
)
from entitytags.payload import (
    PAYLOAD_TAG_KIND,
    PayloadTag,
    _is_valid_payload_or_uuid,
    new_payload_tag,
)
from entitytags.relation import (
    RELATION_TAG_KIND,
    RelationTag,
    _relation_suffix_to_key,
    is_valid_relation,
    new_relation_tag,
)
from entitytags.storage import (
    FILESYSTEM_TAG_KIND,
    STORAGE_TAG_KIND,
    VOLUME_TAG_KIND,
    FilesystemTag,
    StorageTag,
    VolumeTag,
    _filesystem_or_volume_suffix_to_id,
    _storage_suffix_to_id,
    is_valid_filesystem,
    is_valid_storage,
    is_valid_volume,
    new_filesystem_tag,
    new_storage_tag,
    new_volume_tag,
)
from entitytags.unit import (
    UNIT_TAG_KIND,
    UnitTag,
    _unit_suffix_to_id,
    is_valid_unit,
    new_unit_tag,
)
from entitytags.user import USER_TAG_KIND, UserTag, is_valid_user, new_user_tag

_T = TypeVar("_T", bound=Tag)


def _checked(
    valid: Callable[[str], bool],
    make: Callable[[str], Tag],
    convert: Callable[[str], str] = lambda suffix: suffix,
) -> Callable[[str], Tag | None]:
    def parse(suffix: str) -> Tag | None:
        entity_id = convert(suffix)
        return make(entity_id) if valid(entity_id) else None

    return parse


def _parse_controller(suffix: str) -> Tag | None:
    # Controller ids are UUIDs, controller agent ids are numbers.
    if is_valid_controller(suffix):
        return new_controller_tag(suffix)
    if is_valid_controller_agent(suffix):
        return new_controller_agent_tag(suffix)
    return None


def _parse_ip_address(suffix: str) -> Tag | None:
    try:
        value = uuid_from_string(suffix)
    except ValueError:
        return None
    return new_ip_address_tag(str(value))


_PARSERS: dict[str, Callable[[str], Tag | None]] = {
    UNIT_TAG_KIND: _checked(is_valid_unit, new_unit_tag, _unit_suffix_to_id),
    MACHINE_TAG_KIND: _checked(is_valid_machine, new_machine_tag, _machine_suffix_to_id),
    APPLICATION_TAG_KIND: _checked(is_valid_application, new_application_tag),
    APPLICATION_OFFER_TAG_KIND: _checked(
        is_valid_application_offer, new_application_offer_tag
    ),
    USER_TAG_KIND: _checked(is_valid_user, new_user_tag),
    ENVIRON_TAG_KIND: _checked(is_valid_environment, new_environ_tag),
    MODEL_TAG_KIND: _checked(is_valid_model, new_model_tag),
    CONTROLLER_TAG_KIND: _parse_controller,
    RELATION_TAG_KIND: _checked(
        is_valid_relation, new_relation_tag, _relation_suffix_to_key
    ),
    ACTION_TAG_KIND: _checked(is_valid_action, new_action_tag),
    OPERATION_TAG_KIND: _checked(is_valid_operation, new_operation_tag),
    VOLUME_TAG_KIND: _checked(
        is_valid_volume, new_volume_tag, _filesystem_or_volume_suffix_to_id
    ),
    CHARM_TAG_KIND: _checked(is_valid_charm, new_charm_tag),
    STORAGE_TAG_KIND: _checked(is_valid_storage, new_storage_tag, _storage_suffix_to_id),
    FILESYSTEM_TAG_KIND: _checked(
        is_valid_filesystem, new_filesystem_tag, _filesystem_or_volume_suffix_to_id
    ),
    IP_ADDRESS_TAG_KIND: _parse_ip_address,
    SUBNET_TAG_KIND: _checked(is_valid_subnet, new_subnet_tag),
    SPACE_TAG_KIND: _checked(is_valid_space, new_space_tag),
    PAYLOAD_TAG_KIND: _checked(_is_valid_payload_or_uuid, new_payload_tag),
    CLOUD_TAG_KIND: _checked(is_valid_cloud, new_cloud_tag),
    CLOUD_CREDENTIAL_TAG_KIND: _checked(
        is_valid_cloud_credential,
        new_cloud_credential_tag,
        _cloud_credential_suffix_to_id,
    ),
    CAAS_MODEL_TAG_KIND: _checked(is_valid_caas_model, new_caas_model_tag),
}


def tag_kind(tag: str) -> str:
    """Return the kind of a tag string, raising InvalidTagError if it has none."""
    index = tag.find("-")
    if index <= 0 or tag[:index] not in _PARSERS:
        raise InvalidTagError(tag)
    return tag[:index]


def parse_tag(tag: str) -> Tag:
    """Parse a tag string into a tag of the matching kind."""
    try:
        kind = tag_kind(tag)
    except InvalidTagError:
        raise InvalidTagError(tag) from None
    suffix = tag[len(kind) + 1 :]
    try:
        parsed = _PARSERS[kind](suffix)
    except ValueError as err:
        raise InvalidTagError(tag, kind) from err
    if parsed is None:
        raise InvalidTagError(tag, kind)
    return parsed


def _parse_as(tag: str, tag_type: type[_T], kind: str) -> _T:
    parsed = parse_tag(tag)
    if not isinstance(parsed, tag_type):
        raise InvalidTagError(tag, kind)
    return parsed


def parse_application_tag(tag: str) -> ApplicationTag:
    """Parse an application tag string."""
    return _parse_as(tag, ApplicationTag, APPLICATION_TAG_KIND)


def parse_application_offer_tag(tag: str) -> ApplicationOfferTag:
    """Parse an application offer tag string."""
    return _parse_as(tag, ApplicationOfferTag, APPLICATION_OFFER_TAG_KIND)


def parse_machine_tag(tag: str) -> MachineTag:
    """Parse a machine tag string."""
    return _parse_as(tag, MachineTag, MACHINE_TAG_KIND)


def parse_unit_tag(tag: str) -> UnitTag:
    """Parse a unit tag string."""
    return _parse_as(tag, UnitTag, UNIT_TAG_KIND)


def parse_user_tag(tag: str) -> UserTag:
    """Parse a user tag string."""
    return _parse_as(tag, UserTag, USER_TAG_KIND)


def parse_cloud_tag(tag: str) -> CloudTag:
    """Parse a cloud tag string."""
    return _parse_as(tag, CloudTag, CLOUD_TAG_KIND)


def parse_cloud_credential_tag(tag: str) -> CloudCredentialTag:
    """Parse a cloud credential tag string."""
    return _parse_as(tag, CloudCredentialTag, CLOUD_CREDENTIAL_TAG_KIND)


def parse_model_tag(tag: str) -> ModelTag:
    """Parse a model tag string."""
    return _parse_as(tag, ModelTag, MODEL_TAG_KIND)


def parse_environ_tag(tag: str) -> EnvironTag:
    """Parse an environment tag string."""
    return _parse_as(tag, EnvironTag, ENVIRON_TAG_KIND)


def parse_caas_model_tag(tag: str) -> CAASModelTag:
    """Parse a CAAS model tag string."""
    return _parse_as(tag, CAASModelTag, CAAS_MODEL_TAG_KIND)


def parse_controller_tag(tag: str) -> ControllerTag:
    """Parse a controller tag string."""
    return _parse_as(tag, ControllerTag, CONTROLLER_TAG_KIND)


def parse_controller_agent_tag(tag: str) -> ControllerAgentTag:
    """Parse a controller agent tag string."""
    return _parse_as(tag, ControllerAgentTag, CONTROLLER_AGENT_TAG_KIND)


def parse_charm_tag(tag: str) -> CharmTag:
    """Parse a charm tag string."""
    return _parse_as(tag, CharmTag, CHARM_TAG_KIND)


def parse_storage_tag(tag: str) -> StorageTag:
    """Parse a storage tag string."""
    return _parse_as(tag, StorageTag, STORAGE_TAG_KIND)


def parse_filesystem_tag(tag: str) -> FilesystemTag:
    """Parse a filesystem tag string."""
    return _parse_as(tag, FilesystemTag, FILESYSTEM_TAG_KIND)


def parse_volume_tag(tag: str) -> VolumeTag:
    """Parse a volume tag string."""
    return _parse_as(tag, VolumeTag, VOLUME_TAG_KIND)


def parse_relation_tag(tag: str) -> RelationTag:
    """Parse a relation tag string."""
    return _parse_as(tag, RelationTag, RELATION_TAG_KIND)


def parse_ip_address_tag(tag: str) -> IPAddressTag:
    """Parse an IP address tag string."""
    return _parse_as(tag, IPAddressTag, IP_ADDRESS_TAG_KIND)


def parse_space_tag(tag: str) -> SpaceTag:
    """Parse a space tag string."""
    return _parse_as(tag, SpaceTag, SPACE_TAG_KIND)


def parse_subnet_tag(tag: str) -> SubnetTag:
    """Parse a subnet tag string."""
    return _parse_as(tag, SubnetTag, SUBNET_TAG_KIND)


def parse_payload_tag(tag: str) -> PayloadTag:
    """Parse a payload tag string."""
    return _parse_as(tag, PayloadTag, PAYLOAD_TAG_KIND)


def parse_action_tag(tag: str) -> ActionTag:
    """Parse an action tag string."""
    return _parse_as(tag, ActionTag, ACTION_TAG_KIND)


def parse_operation_tag(tag: str) -> OperationTag:
    """Parse an operation tag string."""
    return _parse_as(tag, OperationTag, OPERATION_TAG_KIND)


def action_receiver_tag(name: str) -> Tag:
    """Return the unit or machine tag an action can be sent to, from its name."""
    if is_valid_unit(name):
        return new_unit_tag(name)
    if is_valid_machine(name):
        return new_machine_tag(name)
    raise ValueError(f"invalid actionreceiver name {_quote(name)}")


def action_receiver_from_tag(tag: str) -> Tag:
    """Return the unit or machine tag an action can be sent to, from a tag string."""
    try:
        return parse_unit_tag(tag)
    except InvalidTagError:
        pass
    try:
        return parse_machine_tag(tag)
    except InvalidTagError:
        pass
    raise ValueError(f"invalid actionreceiver tag {_quote(tag)}")