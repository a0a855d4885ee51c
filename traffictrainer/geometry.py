"""Small 3D math types: vectors, rotations and transforms."""

from __future__ import annotations

import math
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Vec3:
    """An immutable 3D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vec3:
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __iter__(self):
        yield from (self.x, self.y, self.z)

    def dot(self, other: Vec3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length(self) -> float:
        return math.sqrt(self.dot(self))

    def normalize_or_zero(self) -> Vec3:
        """Return the unit vector in this direction, or zero if there is none."""
        length = self.length()
        if length == 0.0 or not math.isfinite(length):
            return Vec3()
        return self * (1.0 / length)

    def _any_orthonormal(self) -> Vec3:
        sign = math.copysign(1.0, self.z)
        a = -1.0 / (sign + self.z)
        b = self.x * self.y * a
        return Vec3(b, sign + self.y * self.y * a, -self.y)


Vec3.ZERO = Vec3(0.0, 0.0, 0.0)
Vec3.X = Vec3(1.0, 0.0, 0.0)
Vec3.Y = Vec3(0.0, 1.0, 0.0)
Vec3.Z = Vec3(0.0, 0.0, 1.0)


@dataclass(frozen=True)
class Quat:
    """A rotation quaternion."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    @classmethod
    def from_axis_angle(cls, axis: Vec3, angle: float) -> Quat:
        """Rotation of ``angle`` radians about ``axis``."""
        unit = axis.normalize_or_zero()
        if unit == Vec3.ZERO:
            raise ValueError("rotation axis must be non-zero")
        s = math.sin(angle / 2.0)
        return cls(unit.x * s, unit.y * s, unit.z * s, math.cos(angle / 2.0))

    @classmethod
    def _from_columns(cls, right: Vec3, up: Vec3, back: Vec3) -> Quat:
        m00, m10, m20 = right
        m01, m11, m21 = up
        m02, m12, m22 = back
        trace = m00 + m11 + m22
        if trace > 0.0:
            s = math.sqrt(trace + 1.0) * 2.0
            return cls((m21 - m12) / s, (m02 - m20) / s, (m10 - m01) / s, 0.25 * s)
        if m00 > m11 and m00 > m22:
            s = math.sqrt(1.0 + m00 - m11 - m22) * 2.0
            return cls(0.25 * s, (m01 + m10) / s, (m02 + m20) / s, (m21 - m12) / s)
        if m11 > m22:
            s = math.sqrt(1.0 + m11 - m00 - m22) * 2.0
            return cls((m01 + m10) / s, 0.25 * s, (m12 + m21) / s, (m02 - m20) / s)
        s = math.sqrt(1.0 + m22 - m00 - m11) * 2.0
        return cls((m02 + m20) / s, (m12 + m21) / s, 0.25 * s, (m10 - m01) / s)

    def __mul__(self, other):
        if isinstance(other, Vec3):
            return self.rotate(other)
        if isinstance(other, Quat):
            a, b = self, other
            return Quat(
                a.w * b.x + a.x * b.w + a.y * b.z - a.z * b.y,
                a.w * b.y - a.x * b.z + a.y * b.w + a.z * b.x,
                a.w * b.z + a.x * b.y - a.y * b.x + a.z * b.w,
                a.w * b.w - a.x * b.x - a.y * b.y - a.z * b.z,
            )
        return NotImplemented

    def rotate(self, vector: Vec3) -> Vec3:
        """Apply this rotation to ``vector``."""
        q = Vec3(self.x, self.y, self.z)
        t = q.cross(vector) * 2.0
        return vector + t * self.w + q.cross(t)

    def _matrix(self) -> tuple[tuple[float, float, float], ...]:
        x, y, z, w = self.x, self.y, self.z, self.w
        return (
            (1 - 2 * (y * y + z * z), 2 * (x * y - w * z), 2 * (x * z + w * y)),
            (2 * (x * y + w * z), 1 - 2 * (x * x + z * z), 2 * (y * z - w * x)),
            (2 * (x * z - w * y), 2 * (y * z + w * x), 1 - 2 * (x * x + y * y)),
        )

    def to_euler_yxz(self) -> tuple[float, float, float]:
        """Return ``(yaw, pitch, roll)`` with rotation order Y, then X, then Z."""
        m = self._matrix()
        yaw = math.atan2(m[0][2], m[2][2])
        pitch = math.asin(max(-1.0, min(1.0, -m[1][2])))
        roll = math.atan2(m[1][0], m[1][1])
        return yaw, pitch, roll


Quat.IDENTITY = Quat()


@dataclass
class Transform:
    """Position, rotation and scale of an object."""

    translation: Vec3 = field(default_factory=Vec3)
    rotation: Quat = field(default_factory=Quat)
    scale: Vec3 = field(default_factory=lambda: Vec3(1.0, 1.0, 1.0))

    def forward(self) -> Vec3:
        """The local -Z direction in world space."""
        return self.rotation.rotate(-Vec3.Z)

    def right(self) -> Vec3:
        """The local +X direction in world space."""
        return self.rotation.rotate(Vec3.X)

    def look_at(self, target: Vec3, up: Vec3) -> None:
        """Rotate so that the forward direction points at ``target``."""
        direction = (target - self.translation).normalize_or_zero()
        if direction == Vec3.ZERO:
            direction = -Vec3.Z
        back = -direction
        up_dir = up.normalize_or_zero()
        if up_dir == Vec3.ZERO:
            up_dir = Vec3.Y
        right = up_dir.cross(back).normalize_or_zero()
        if right == Vec3.ZERO:
            right = up_dir._any_orthonormal()
        new_up = back.cross(right)
        self.rotation = Quat._from_columns(right, new_up, back)


CAMERA_OFFSET = Vec3(0.0, 5.0, -10.0)


def follow_camera(car: Transform | None, camera: Transform) -> None:
    """Place ``camera`` behind and above ``car`` and aim it at the car."""
    if car is None:
        return
    camera.translation = car.translation + car.rotation.rotate(CAMERA_OFFSET)
    camera.look_at(car.translation, Vec3.Y)