"""Three-component vector with the game's rotation and geometry helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar, Iterator

_NORMALIZE_EPSILON = 0.0001
_RAD_TO_DEG = 57.295776


def _fmt(value: float) -> str:
    return format(value, "g")


def _floor(value: float) -> float:
    return float(math.floor(value)) if math.isfinite(value) else value


def _ceil(value: float) -> float:
    return float(math.ceil(value)) if math.isfinite(value) else value


def _clamp(value: float, low: float, high: float) -> float:
    if value < low:
        return low
    if high < value:
        return high
    return value


@dataclass(frozen=True, eq=False)
class Vec3:
    """An immutable 3D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    ZERO: ClassVar[Vec3]

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vec3:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vec3):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __hash__(self) -> int:
        return hash((self.x, self.y, self.z))

    def length(self) -> float:
        """Return the Euclidean length."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalized(self) -> Vec3:
        """Return a unit vector in the same direction, or ZERO if too short."""
        length = self.length()
        if length >= _NORMALIZE_EPSILON:
            inv = 1.0 / length
            return Vec3(self.x * inv, self.y * inv, self.z * inv)
        return Vec3.ZERO

    def max_component(self) -> float:
        """Return the largest of the three components."""
        return max(self.x, self.y, self.z)

    def is_near(self, other: Vec3, epsilon: float) -> bool:
        """True if every component differs from ``other`` by less than ``epsilon``."""
        return (
            math.fabs(self.x - other.x) < epsilon
            and math.fabs(self.y - other.y) < epsilon
            and math.fabs(self.z - other.z) < epsilon
        )

    def is_nan(self) -> bool:
        """True if any component is NaN."""
        return math.isnan(self.x) or math.isnan(self.y) or math.isnan(self.z)

    def __str__(self) -> str:
        return f"Vec3({_fmt(self.x)}, {_fmt(self.y)}, {_fmt(self.z)})"

    def to_json(self) -> str:
        """Return the vector as a JSON array string."""
        return f"[{_fmt(self.x)}, {_fmt(self.y)}, {_fmt(self.z)}]"

    @staticmethod
    def from_xz(xz: Vec3, y: float) -> Vec3:
        """Take x and z from ``xz`` and use the given ``y``."""
        return Vec3(xz.x, y, xz.z)

    @staticmethod
    def direction_from_rotation(pitch: float, yaw: float) -> Vec3:
        """Return the unit look direction for a pitch and yaw in degrees."""
        rad_pitch = pitch * (-math.pi / 180.0)
        rad_yaw = yaw * (-math.pi / 180.0) - math.pi / 2.0
        cos_pitch = math.cos(rad_pitch)
        return Vec3(
            math.cos(rad_yaw) * cos_pitch,
            math.sin(rad_pitch),
            math.sin(rad_yaw) * cos_pitch,
        )

    @staticmethod
    def direction_from_rotation_vec(rot: Vec3) -> Vec3:
        """Like direction_from_rotation, with pitch in ``rot.x`` and yaw in ``rot.y``."""
        return Vec3.direction_from_rotation(rot.x, rot.y)

    @staticmethod
    def rotation_from_direction(direction: Vec3) -> Vec3:
        """Return (pitch, yaw, 0) in degrees for a direction vector."""
        horizontal = math.sqrt(direction.x * direction.x + direction.z * direction.z)
        pitch = math.atan2(direction.y, horizontal) * -_RAD_TO_DEG
        yaw = math.atan2(direction.z, direction.x) * _RAD_TO_DEG - 90.0
        return Vec3(pitch, yaw, 0.0)

    @staticmethod
    def clamp(val: Vec3, low: Vec3, high: Vec3) -> Vec3:
        """Clamp each component of ``val`` between ``low`` and ``high``."""
        return Vec3(
            _clamp(val.x, low.x, high.x),
            _clamp(val.y, low.y, high.y),
            _clamp(val.z, low.z, high.z),
        )

    @staticmethod
    def floor(v: Vec3, offset: float = 0.0) -> Vec3:
        """Floor each component after adding ``offset``."""
        return Vec3(_floor(v.x + offset), _floor(v.y + offset), _floor(v.z + offset))

    @staticmethod
    def ceil(v: Vec3) -> Vec3:
        """Ceil each component."""
        return Vec3(_ceil(v.x), _ceil(v.y), _ceil(v.z))

    @staticmethod
    def abs(v: Vec3) -> Vec3:
        """Absolute value of each component."""
        return Vec3(math.fabs(v.x), math.fabs(v.y), math.fabs(v.z))

    @staticmethod
    def xz(v: Vec3) -> Vec3:
        """Project onto the horizontal plane by zeroing y."""
        return Vec3(v.x, 0.0, v.z)

    @staticmethod
    def distance_to_line_squared(point: Vec3, line_start: Vec3, line_end: Vec3) -> float:
        """Squared distance from ``point`` to the infinite line through two points.

        When the two points coincide the plain (unsquared) distance to them is
        returned.
        """
        line_dir = line_end - line_start
        len_sq = line_dir.x * line_dir.x + line_dir.y * line_dir.y + line_dir.z * line_dir.z
        offset = point - line_start
        if len_sq == 0.0:
            return offset.length()
        t = (offset.x * line_dir.x + offset.y * line_dir.y + offset.z * line_dir.z) / len_sq
        projection = line_start + line_dir * t
        diff = point - projection
        return diff.x * diff.x + diff.y * diff.y + diff.z * diff.z


Vec3.ZERO = Vec3(0.0, 0.0, 0.0)