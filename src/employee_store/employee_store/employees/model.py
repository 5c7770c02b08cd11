from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Employee:
    """Domain entity: one named integer record.

    Note: plain data object, never a handle onto a stored row.
    """

    name: str
    value: int

    def to_dict(self) -> dict:
        return {"name": self.name, "value": self.value}


@dataclass(frozen=True)
class AbcSum:
    """One qualifying group of the ABC sums report."""

    initial: str
    sum: int

    def to_dict(self) -> dict:
        return {"initial": self.initial, "sum": self.sum}
