"""
Two-operand forms of the Vector operations.
Mutating forms work on a copy of the first operand and leave both inputs untouched.
"""

from typing import Any, Callable

from .vector import Vector


def bin_op(a: Vector, b: Vector, op: Callable[[Any, Any, int], Any]) -> Vector:
    return Vector(a).bin_op(b, op)


def add(a: Vector, b: Vector) -> Vector:
    """New vector holding a + b."""
    return Vector(a).add(b)


def subtract(a: Vector, b: Vector) -> Vector:
    """New vector holding a - b."""
    return Vector(a).subtract(b)


def scale(vector: Vector, scalar) -> Vector:
    return Vector(vector).scale(scalar)


def normalize(vector: Vector) -> Vector:
    return Vector(vector).normalize()


def project(a: Vector, b: Vector) -> Vector:
    """New vector holding the projection of a onto b; b is not modified."""
    return a.project(Vector(b))


def combine(a: Vector, b: Vector) -> Vector:
    """New vector holding b appended to a."""
    return Vector(a).combine(b)


def dot(a: Vector, b: Vector):
    return a.dot(b)


def angle(a: Vector, b: Vector) -> float:
    return a.angle(b)


def equals(a: Vector, b: Vector) -> bool:
    return a.equals(b)
