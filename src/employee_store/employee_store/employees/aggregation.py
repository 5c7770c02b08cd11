from __future__ import annotations

from typing import Iterable

from .model import AbcSum, Employee


def grouped_sum(employees: Iterable[Employee], prefixes: Iterable[str], threshold: int) -> list[AbcSum]:
    """Sum values per leading character and keep groups with total >= threshold.

    Only names whose first character is in `prefixes` take part. Results are
    ordered by group key. Used over a full listing, over the rows a SQL
    repository has already filtered by prefix, and by in-memory fakes.
    """
    wanted = set(prefixes)
    totals: dict[str, int] = {}
    for e in employees:
        if not e.name:
            continue
        initial = e.name[0]
        if initial not in wanted:
            continue
        totals[initial] = totals.get(initial, 0) + int(e.value)

    return [
        AbcSum(initial=initial, sum=total)
        for initial, total in sorted(totals.items())
        if total >= threshold
    ]
