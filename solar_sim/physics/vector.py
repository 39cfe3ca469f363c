"""Fixed-dimension vectors for classical mechanics.

A ``PhysicsVector`` has a dimension that is set when it is built and never
changes afterwards; only the component values are mutable. Component 0 is X,
1 is Y and 2 is Z.

Building a vector from a sequence of the wrong length never fails: excess
trailing components are dropped and missing ones are filled with zeros.
"""

import math
import sys
from typing import Iterable, List, Optional

from solar_sim.physics.formattable import Formattable


def _seven_dim_pairs(i: int):
    """Index pairs contributing to component ``i`` of the 7D cross product."""
    return (
        ((i + 1) % 7, (i + 3) % 7),
        ((i + 2) % 7, (i + 6) % 7),
        ((i + 4) % 7, (i + 5) % 7),
    )


_CROSS7_TERMS = tuple(_seven_dim_pairs(i) for i in range(7))


class PhysicsVector(Formattable):
    """Vector of ``dim`` real components with vector-space operations."""

    __slots__ = ("_dim", "_components")

    def __init__(self, components: Iterable[float] = (), dim: Optional[int] = None):
        """Create a vector.

        Args:
            components: Initial component values
            dim: Dimension of the vector. Defaults to the number of components
                given; when set, the components are truncated or zero-padded
                to match.
        """
        values = [float(c) for c in components]
        if dim is None:
            dim = len(values)
        if dim < 1:
            raise ValueError(f"Vector dimension must be at least 1, got {dim}")
        self._dim = int(dim)
        self._components: List[float] = values
        if len(values) != self._dim:
            self._match_size()

    def _match_size(self):
        if len(self._components) > self._dim:
            del self._components[self._dim:]
        else:
            self._components.extend([0.0] * (self._dim - len(self._components)))

    @classmethod
    def zero(cls, dim: int) -> "PhysicsVector":
        """Return the all-zero vector of the given dimension."""
        return cls((), dim=dim)

    def copy(self) -> "PhysicsVector":
        return PhysicsVector(self._components, dim=self._dim)

    @property
    def dimension(self) -> int:
        return self._dim

    # Component access

    def _check_index(self, index: int):
        if not 0 <= index < self._dim:
            raise IndexError(
                f"Component index {index} out of range for {self._dim}-dimensional vector"
            )

    def component_at(self, index: int) -> float:
        self._check_index(index)
        return self._components[index]

    def set_component_at(self, index: int, value: float):
        self._check_index(index)
        self._components[index] = float(value)

    @property
    def x(self) -> float:
        return self.component_at(0)

    @x.setter
    def x(self, value: float):
        self.set_component_at(0, value)

    @property
    def y(self) -> float:
        return self.component_at(1)

    @y.setter
    def y(self, value: float):
        self.set_component_at(1, value)

    @property
    def z(self) -> float:
        return self.component_at(2)

    @z.setter
    def z(self, value: float):
        self.set_component_at(2, value)

    def __getitem__(self, index: int) -> float:
        return self.component_at(index)

    def __setitem__(self, index: int, value: float):
        self.set_component_at(index, value)

    def __len__(self) -> int:
        return self._dim

    def __iter__(self):
        return iter(self._components)

    def to_list(self) -> List[float]:
        return list(self._components)

    # Equality

    def __eq__(self, other) -> bool:
        if self is other:
            return True
        if not isinstance(other, PhysicsVector):
            return NotImplemented
        if self._dim != other._dim:
            return False
        for a, b in zip(self._components, other._components):
            if a != b:
                return False
        return True

    def __ne__(self, other) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None

    # Algebra

    def _require_same_dim(self, other: "PhysicsVector"):
        if self._dim != other._dim:
            raise ValueError(
                f"Dimension mismatch: {self._dim}-vector and {other._dim}-vector"
            )

    def add(self, other: "PhysicsVector") -> "PhysicsVector":
        self._require_same_dim(other)
        return PhysicsVector(
            [a + b for a, b in zip(self._components, other._components)], dim=self._dim
        )

    def subtract(self, other: "PhysicsVector") -> "PhysicsVector":
        self._require_same_dim(other)
        return PhysicsVector(
            [a - b for a, b in zip(self._components, other._components)], dim=self._dim
        )

    def negate(self) -> "PhysicsVector":
        # Exact zeros keep their sign so 0 never becomes -0.
        return PhysicsVector(
            [-c if c != 0 else c for c in self._components], dim=self._dim
        )

    def scale(self, factor: float) -> "PhysicsVector":
        """Multiply every component by ``factor`` in place and return self."""
        for i in range(self._dim):
            self._components[i] *= factor
        return self

    def scaled_by(self, factor: float) -> "PhysicsVector":
        return self.copy().scale(factor)

    def __add__(self, other):
        if not isinstance(other, PhysicsVector):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, PhysicsVector):
            return NotImplemented
        return self.subtract(other)

    def __neg__(self):
        return self.negate()

    def __mul__(self, factor):
        if isinstance(factor, PhysicsVector):
            return NotImplemented
        return self.scaled_by(factor)

    __rmul__ = __mul__

    def __iadd__(self, other):
        if not isinstance(other, PhysicsVector):
            return NotImplemented
        self._require_same_dim(other)
        for i in range(self._dim):
            self._components[i] += other._components[i]
        return self

    def __isub__(self, other):
        if not isinstance(other, PhysicsVector):
            return NotImplemented
        self._require_same_dim(other)
        for i in range(self._dim):
            self._components[i] -= other._components[i]
        return self

    # Vector calculus

    def dot(self, other: "PhysicsVector") -> float:
        self._require_same_dim(other)
        total = 0.0
        for a, b in zip(self._components, other._components):
            total += a * b
        return total

    def length_squared(self) -> float:
        total = 0.0
        for c in self._components:
            total += c * c
        return total

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def magnitude(self) -> float:
        return self.length()

    def unit_vector(self) -> "PhysicsVector":
        """Return V/|V|, or the zero vector when |V| is within machine epsilon of 0."""
        magnitude = self.magnitude()
        if magnitude <= sys.float_info.epsilon:
            return PhysicsVector.zero(self._dim)
        return self.scaled_by(1.0 / magnitude)

    def cross(self, other: "PhysicsVector") -> "PhysicsVector":
        """Vector product, defined only in 3 and 7 dimensions."""
        self._require_same_dim(other)
        u = self._components
        v = other._components
        if self._dim == 3:
            return PhysicsVector(
                [
                    u[1] * v[2] - u[2] * v[1],
                    u[2] * v[0] - u[0] * v[2],
                    u[0] * v[1] - u[1] * v[0],
                ],
                dim=3,
            )
        if self._dim == 7:
            out = []
            for terms in _CROSS7_TERMS:
                e = 0.0
                for a, b in terms:
                    e += u[a] * v[b] - u[b] * v[a]
                out.append(e)
            return PhysicsVector(out, dim=7)
        raise ValueError(
            f"Vector product only defined for 3- and 7-dimensional vectors, got {self._dim}"
        )

    # Formatting

    def format(self) -> str:
        return "(" + ",".join(f"{c:g}" for c in self._components) + ")"

    def __repr__(self) -> str:
        return f"PhysicsVector({self._components!r}, dim={self._dim})"


def vector3(x: float = 0.0, y: float = 0.0, z: float = 0.0) -> PhysicsVector:
    """Build a 3-dimensional vector."""
    return PhysicsVector((x, y, z), dim=3)


def dot(a: PhysicsVector, b: PhysicsVector) -> float:
    return a.dot(b)


def cross(a: PhysicsVector, b: PhysicsVector) -> PhysicsVector:
    return a.cross(b)
