from __future__ import annotations

import logging
from typing import Iterable, Optional, Sequence

from ..common.validators import (
    require_int,
    require_integer,
    require_name,
    require_non_empty,
    require_prefixes,
)
from ..core.constants import DEFAULT_ABC_PREFIXES, DEFAULT_ABC_THRESHOLD
from .aggregation import grouped_sum
from .increment_rule import IncrementRule
from .model import AbcSum, Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


class EmployeeService:
    """Use cases over the employee store: CRUD, increment rule, ABC sums."""

    def __init__(self, employees: EmployeeRepository, *, rule: Optional[IncrementRule] = None):
        self._employees = employees
        self._rule = rule or IncrementRule()

    def list_employees(self) -> Sequence[Employee]:
        return self._employees.list_all()

    def add_employee(self, name: str, value: int) -> Employee:
        name = require_name(name, "Name")
        value = require_int(value, "Value")

        self._employees.create(name=name, value=value)
        logger.info("Added employee %r (value=%d)", name, value)
        return Employee(name=name, value=value)

    def update_employee(self, original_name: str, new_name: str, value: int) -> Employee:
        original_name = require_non_empty(original_name, "Original name")
        new_name = require_name(new_name, "New name")
        value = require_int(value, "Value")

        self._employees.update(original_name=original_name, new_name=new_name, value=value)
        logger.info("Updated employee %r -> %r (value=%d)", original_name, new_name, value)
        return Employee(name=new_name, value=value)

    def delete_employee(self, name: str) -> None:
        name = require_non_empty(name, "Name")
        self._employees.delete(name)
        logger.info("Deleted employee %r", name)

    def apply_increment_rule(self) -> int:
        rows = self._employees.apply_increment_rule(self._rule)
        logger.info("Applied increment rule to %d employees", rows)
        return rows

    def compute_abc_sums(
        self,
        prefixes: Iterable[str] = DEFAULT_ABC_PREFIXES,
        threshold: int = DEFAULT_ABC_THRESHOLD,
        *,
        recompute: bool = False,
    ) -> Sequence[AbcSum]:
        """Grouped sums per leading character, filtered by threshold.

        By default the store computes the groups. With recompute=True the
        groups are rebuilt from a full listing; both give the same result.
        """
        prefixes = require_prefixes(prefixes)
        threshold = require_integer(threshold, "Threshold")

        if recompute:
            return grouped_sum(self._employees.list_all(), prefixes, threshold)
        return list(self._employees.grouped_sum(prefixes=prefixes, threshold=threshold))
