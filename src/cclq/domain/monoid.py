from __future__ import annotations

"""
Monoid Interface.

Abstract base shared by the two combinable structures of the pipeline:
flat pair sequences (concatenation) and canonical values (key union).
"""

from abc import ABC, abstractmethod
from typing import Iterable, Type, TypeVar

M = TypeVar("M", bound="Monoid")


class Monoid(ABC):
    """
    A type with an identity element and an associative binary merge.

    Associativity is not enforced by the type system; implementations are
    covered by law tests instead.
    """

    @classmethod
    @abstractmethod
    def empty(cls: Type[M]) -> M:
        """Return the identity element."""

    @abstractmethod
    def merge(self: M, other: M) -> M:
        """
        Combine two values into a new one without mutating either.

        Args:
            other: Right-hand operand.

        Returns:
            A new value of the same type.
        """

    @classmethod
    def aggregate(cls: Type[M], items: Iterable[M]) -> M:
        """
        Left-fold a sequence of values with merge, starting at empty().

        Args:
            items: Values to combine, in order.

        Returns:
            The combined value (empty() for no items).
        """
        acc = cls.empty()
        for item in items:
            acc = acc.merge(item)
        return acc
