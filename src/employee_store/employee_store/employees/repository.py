from __future__ import annotations

from typing import Protocol, Sequence

from .increment_rule import IncrementRule
from .model import AbcSum, Employee


class EmployeeRepository(Protocol):
    """Repository interface for Employee.

    Services depend on this interface, never on a concrete database.
    Implementations raise ConflictError on duplicate names and StorageError
    on engine failures.
    """

    def list_all(self) -> Sequence[Employee]:
        raise NotImplementedError

    def create(self, *, name: str, value: int) -> None:
        raise NotImplementedError

    def update(self, *, original_name: str, new_name: str, value: int) -> None:
        """Rename and revalue atomically; NotFoundError if original_name is absent."""
        raise NotImplementedError

    def delete(self, name: str) -> None:
        raise NotImplementedError

    def apply_increment_rule(self, rule: IncrementRule) -> int:
        raise NotImplementedError

    def grouped_sum(self, *, prefixes: Sequence[str], threshold: int) -> Sequence[AbcSum]:
        raise NotImplementedError
