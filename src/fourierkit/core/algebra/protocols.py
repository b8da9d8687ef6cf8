"""Capability protocols for the algebra layer.

Each protocol names one capability set. Concrete numeric types implement
every set they need directly instead of inheriting through a chain, and
generic code states the capability it requires by annotating against the
narrowest protocol.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Protocol, runtime_checkable, TypeVar


T = TypeVar("T")


@runtime_checkable
class LinearSpace(Protocol):
    """Elements that can be added, negated and scaled by a real number."""

    @abstractmethod
    def __neg__(self: T) -> T: ...

    @abstractmethod
    def __add__(self: T, other: T) -> T: ...

    @abstractmethod
    def __sub__(self: T, other: T) -> T: ...

    @abstractmethod
    def __mul__(self: T, other: float) -> T: ...

    @abstractmethod
    def __truediv__(self: T, other: float) -> T: ...


@runtime_checkable
class ScalarSpace(Protocol):
    """Field elements: a linear space closed under multiplication.

    Adds the multiplicative identity, modulus and the elementary functions
    used by the transform kernels.
    """

    @abstractmethod
    def __neg__(self: T) -> T: ...

    @abstractmethod
    def __add__(self: T, other: T) -> T: ...

    @abstractmethod
    def __sub__(self: T, other: T) -> T: ...

    @abstractmethod
    def __mul__(self: T, other: T) -> T: ...

    @abstractmethod
    def __truediv__(self: T, other: T) -> T: ...

    @abstractmethod
    def __abs__(self) -> float: ...

    @abstractmethod
    def abs(self) -> float: ...

    @abstractmethod
    def abs_square(self) -> float: ...

    @abstractmethod
    def conj(self: T) -> T: ...

    @abstractmethod
    def sqrt(self: T) -> T: ...

    @abstractmethod
    def sin(self: T) -> T: ...

    @abstractmethod
    def cos(self: T) -> T: ...


@runtime_checkable
class ComplexSpace(Protocol):
    """Scalars with a real and imaginary part and a polar representation."""

    @property
    @abstractmethod
    def re(self) -> float: ...

    @property
    @abstractmethod
    def im(self) -> float: ...

    @abstractmethod
    def phase(self) -> float: ...

    @abstractmethod
    def arg(self) -> float: ...


@runtime_checkable
class InnerProduct(Protocol):
    """Elements with a dot product."""

    @abstractmethod
    def dot(self, other): ...
