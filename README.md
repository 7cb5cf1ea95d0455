# bedrockdefs

Definitions for working with a block-game server: integer enumerations for
actors, commands, diagnostics and scripting, a validated connection
definition record, and immutable `Vec2` / `Vec3` vector types.

It needs nothing beyond the Python standard library (Python 3.10 or later).

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `bedrockdefs.vec2`

`Vec2(x=0.0, y=0.0)` is a frozen dataclass. It compares and hashes by value,
unpacks as `x, y = v`, and has `Vec2.ZERO`.

- `normalized()` returns a unit vector, or `Vec2.ZERO` when the length is
  below 0.0001.
- `rotate(degrees)` rotates counter-clockwise.
- `str(v)` gives `Vec2(1, 2)`, and `to_json()` gives `[1, 2]`.

### `bedrockdefs.vec3`

`Vec3(x=0.0, y=0.0, z=0.0)` is a frozen dataclass. It compares and hashes by
value, unpacks as `x, y, z = v`, and has `Vec3.ZERO`.

It supports `+` and `-` with another `Vec3`, and `*` with a number on
either side.

Methods:

- `length()`
- `normalized()`, which returns `Vec3.ZERO` when the length is below 0.0001
- `max_component()`
- `is_near(other, epsilon)`, which is true when every component differs by
  less than `epsilon`
- `is_nan()`
- `str(v)`, giving `Vec3(1, 2, 3)`
- `to_json()`, giving `[1, 2, 3]`

Static helpers:

- `from_xz(xz, y)`
- `direction_from_rotation(pitch, yaw)` and `direction_from_rotation_vec(rot)`,
  which take degrees and return a unit look direction
- `rotation_from_direction(direction)`, which returns `(pitch, yaw, 0)` in
  degrees
- `clamp(val, low, high)`
- `floor(v, offset=0.0)`
- `ceil(v)`
- `abs(v)`
- `xz(v)`
- `distance_to_line_squared(point, line_start, line_end)`

`distance_to_line_squared` measures against the infinite line through the two
points. When the two points are the same, it returns the plain, unsquared
distance.

### `bedrockdefs.diagnostics`

- `LogAreaId`: the subsystem a log message belongs to, from `ALL` to
  `SERIALIZATION`, plus `INVALID` (10000).
- `LogLevel`: `VERBOSE`, `INFO`, `WARNING` and `ERROR`, with the values 1, 2, 4
  and 8.

### `bedrockdefs.network`

`ConnectionDefinition(port_ipv4=0, port_ipv6=0, min_connections=0, max_connections=0)`
is a frozen dataclass.

- The ports must be integers from 0 to 65535.
- The connection counts must be integers from 0 to 4294967295.
- A value that is not an integer raises `TypeError`, including `bool`.
- An integer out of range raises `ValueError`.

### `bedrockdefs.scripting`

`PluginExecutionGroup` has the members `PACK_LOAD`, `SERVER_START`,
`UNKNOWN_3` and `UNKNOWN_4`.

### `bedrockdefs.commands`

- `CommandBlockMode`
- `CommandOriginType`
- `CommandOutputType`
- `CommandParameterOption`, which is an `IntFlag`, so its options combine with
  `|`
- `CommandPermissionLevel`, which runs from `ANY` to `INTERNAL`
- `HardNonTerminal`, the grammar symbols from `0x100000` upward

### `bedrockdefs.actor`

- `MessageId`
- `ActorCategory`, which is an `IntFlag`
- `ActorDamageCause`, where `NONE` is -1
- `ActorDataBoundingBoxComponentType`
- `ActorDataIDs`
- `ActorEvent`
- `ActorFlags`, whose values are bit positions
- `ActorLinkType`
- `ActorType`

## Example

```python
from bedrockdefs.vec3 import Vec3
from bedrockdefs.commands import CommandPermissionLevel
from bedrockdefs.actor import ActorCategory

direction = Vec3.direction_from_rotation(0.0, 90.0)
print(direction.to_json())

print(int(CommandPermissionLevel.ADMIN))  # 2
hostile = ActorCategory.MONSTER | ActorCategory.UNDEAD
print(ActorCategory.UNDEAD in hostile)     # True
```

## Sample command

`bedrockdefs-sample` prints two lines and takes no options other than
`--help`:

- the IPv6 port of a default `ConnectionDefinition`, which is `0`
- the value of `CommandPermissionLevel.ADMIN`, which is `2`

```
bedrockdefs-sample
```

## What this package does not do

This package only defines values and vector math. It does not include:

- a logger that writes messages by `LogAreaId` and `LogLevel`
- a network listener that uses a `ConnectionDefinition`
- anything that parses or runs commands