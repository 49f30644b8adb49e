# entitytags

Typed tags for the entities of a deployment: machines, units, applications,
application offers, users, clouds and cloud credentials, models,
environments, CAAS models, controllers and controller agents, charms,
storage instances, filesystems, volumes, relations, IP addresses, spaces,
subnets, payloads, actions and operations.

Each tag has two forms:

- a human-readable **id**, returned by `tag.id()`, such as `wordpress/2` or
  `10/lxc/1`;
- a machine-friendly **string**, returned by `str(tag)`, such as
  `unit-wordpress-2` or `machine-10-lxc-1`, safe for file paths and wire
  formats.

`tag.kind()` gives the kind, such as `"unit"` or `"machine"`. Every tag class
derives from `entitytags.base.Tag` and is a frozen dataclass, so tags compare
by value and can be used as dictionary keys or set members.

## Installation

```
pip install entitytags
```

The package has no runtime dependencies.

## Building tags

Each kind of tag has a `new_*_tag` function in its module:

| Module                   | Constructors                                                        |
|--------------------------|---------------------------------------------------------------------|
| `entitytags.application` | `new_application_tag`, `new_application_offer_tag`                  |
| `entitytags.machine`     | `new_machine_tag`                                                   |
| `entitytags.unit`        | `new_unit_tag`                                                      |
| `entitytags.user`        | `new_user_tag`, `new_local_user_tag`                                |
| `entitytags.cloud`       | `new_cloud_tag`, `new_cloud_credential_tag`                         |
| `entitytags.model`       | `new_model_tag`, `new_environ_tag`, `new_caas_model_tag`, `new_controller_tag`, `new_controller_agent_tag` |
| `entitytags.charm`       | `new_charm_tag`                                                     |
| `entitytags.storage`     | `new_storage_tag`, `new_filesystem_tag`, `new_volume_tag`           |
| `entitytags.relation`    | `new_relation_tag`                                                  |
| `entitytags.network`     | `new_ip_address_tag`, `new_space_tag`, `new_subnet_tag`             |
| `entitytags.payload`     | `new_payload_tag`                                                   |
| `entitytags.action`      | `new_action_tag`, `new_operation_tag`                               |

```python
from entitytags.unit import new_unit_tag
from entitytags.machine import new_machine_tag
from entitytags.user import new_user_tag

unit = new_unit_tag("wordpress/2")
str(unit)        # "unit-wordpress-2"
unit.id()        # "wordpress/2"
unit.number()    # 2

machine = new_machine_tag("10/lxc/1")
str(machine)             # "machine-10-lxc-1"
machine.container_type() # "lxc"
machine.child_id()       # "1"
machine.parent()         # the tag for machine "10"; None for a plain machine

user = new_user_tag("bob@local")
user.is_local()  # True
str(user)        # "user-bob"
```

Most constructors check their argument and raise `ValueError` when it is not
a valid id (for example `new_unit_tag("foo")`). The application, application
offer, machine, model, environment, CAAS model, controller and payload
constructors accept any string as given.

Some tags offer more than `kind()` and `id()`:

- `UnitTag.shortened_string(max_length)` returns a tag string no longer than
  `max_length`, replacing the tail of a long application name with a CRC-32
  hash; it raises `ValueError` when `max_length` is below 21.
- `ModelTag.short_id()` returns the first six characters of the UUID.
- `ControllerAgentTag.number()` returns the agent number.
- `UserTag` has `name()`, `domain()`, `is_local()` and `with_domain(domain)`.
- `CloudCredentialTag` has `cloud()`, `owner()`, `name()` and `is_zero()`.

`entitytags.storage` also has `storage_name`, `filesystem_machine`,
`filesystem_unit`, `volume_machine` and `volume_unit`; the last four return
the machine or unit tag a filesystem or volume is bound to, or `None`.
`entitytags.unit` has `unit_application` and `unit_number`.

## Parsing tags

```python
from entitytags.parse import parse_tag, parse_unit_tag, tag_kind

tag = parse_tag("unit-rabbitmq-server-0")
tag.kind()   # "unit"
tag.id()     # "rabbitmq-server/0"

tag_kind("machine-42")   # "machine"

parse_unit_tag("application-dave")
# raises InvalidTagError: "application-dave" is not a valid unit tag
```

`entitytags.parse` has a `parse_*_tag` function for every kind of tag.
Parsing errors are raised as `entitytags.base.InvalidTagError`, a subclass of
`ValueError`. A `controller-` tag parses to a `ControllerTag` when its id is a
UUID and to a `ControllerAgentTag` when it is a number.

`action_receiver_tag(name)` and `action_receiver_from_tag(tag)` return the
unit or machine tag that an action can be sent to, and raise `ValueError`
otherwise.

`entitytags.base.readable_string(tag)` returns `"<kind> <id>"`, or `""` for
`None`.

## Validation helpers

Every module has `is_valid_*` functions for its ids and names.

```python
from entitytags.application import is_valid_application, validate_application_name
from entitytags.charm import is_valid_charm

is_valid_application("foo-2")      # False
validate_application_name("Application")
# raises ValueError explaining the unexpected uppercase character
is_valid_charm("cs:~user/series/charm-1")  # True
```

## Sets of tags

```python
from entitytags.tagset import TagSet, new_set_from_strings

tags = new_set_from_strings("unit-wordpress-0", "machine-0")
len(tags)                         # 2
[str(t) for t in tags.sorted_values()]
# ["machine-0", "unit-wordpress-0"]
```

`TagSet` supports `add`, `remove` (absent tags are ignored), `is_empty`,
`values`, `sorted_values`, `union`, `intersection` and `difference` (also as
`|`, `&` and `-`), as well as `in`, `len`, `==` and iteration.
`new_set_from_strings` raises `InvalidTagError` on the first string that does
not parse.

## Running the tests

```
pip install -e ".[test]"
pytest
```