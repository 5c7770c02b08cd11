from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

from ..core.constants import INCREMENT_E, INCREMENT_G, INCREMENT_OTHER
from ..core.enums import Bucket

# Leading character -> bucket. Anything not listed falls into Bucket.OTHER.
PREFIX_BUCKETS: Mapping[str, Bucket] = {
    "E": Bucket.E,
    "G": Bucket.G,
}


def classify(name: str) -> Bucket:
    """Return the bucket for a name (first character, case-sensitive)."""
    if not name:
        return Bucket.OTHER
    return PREFIX_BUCKETS.get(name[0], Bucket.OTHER)


def _default_deltas() -> dict[Bucket, int]:
    return {
        Bucket.E: INCREMENT_E,
        Bucket.G: INCREMENT_G,
        Bucket.OTHER: INCREMENT_OTHER,
    }


@dataclass(frozen=True)
class IncrementRule:
    """Per-bucket delta applied to every employee in one transaction.

    Every name maps to exactly one bucket, so applying the rule touches each
    row once. The rule is not idempotent: applying it twice adds twice.
    """

    deltas: Mapping[Bucket, int] = field(default_factory=_default_deltas)

    def __post_init__(self) -> None:
        missing = [b for b in Bucket if b not in self.deltas]
        if missing:
            raise ValueError(f"IncrementRule missing deltas for {missing}")

    def delta_for(self, name: str) -> int:
        return int(self.deltas[classify(name)])

    def case_sql(self, column: str, paramstyle: str) -> tuple[str, list]:
        """Render the classification as one SQL CASE on the leading character.

        Mirrors classify(): SUBSTR compares the first character exactly, and
        the ELSE branch is the OTHER bucket.
        """
        parts = [f"CASE SUBSTR({column}, 1, 1)"]
        params: list = []
        for prefix, bucket in PREFIX_BUCKETS.items():
            parts.append(f"WHEN {paramstyle} THEN {paramstyle}")
            params.extend([prefix, int(self.deltas[bucket])])
        parts.append(f"ELSE {paramstyle} END")
        params.append(int(self.deltas[Bucket.OTHER]))
        return " ".join(parts), params
