from __future__ import annotations

import threading

import pytest

from src.employee_store.employee_store.core.exceptions import ConflictError, NotFoundError, StorageError
from src.employee_store.employee_store.database.connection import SQLiteConnection
from src.employee_store.employee_store.employees.aggregation import grouped_sum
from src.employee_store.employee_store.employees.increment_rule import IncrementRule
from src.employee_store.employee_store.employees.model import AbcSum, Employee
from src.employee_store.employee_store.employees.service import EmployeeService
from src.employee_store.employee_store.employees.sql_employee_repository import SQLEmployeeRepository


def _as_dict(repo):
    return {e.name: e.value for e in repo.list_all()}


def test_create_then_list(sqlite_repo):
    sqlite_repo.create(name="Abe", value=42)
    assert sqlite_repo.list_all() == [Employee("Abe", 42)]


def test_create_duplicate_raises_conflict(sqlite_repo, seed):
    seed(("Abe", 1))
    with pytest.raises(ConflictError):
        sqlite_repo.create(name="Abe", value=99)
    assert _as_dict(sqlite_repo) == {"Abe": 1}


def test_names_are_case_sensitive(sqlite_repo, seed):
    seed(("abe", 1), ("Abe", 2))
    assert _as_dict(sqlite_repo) == {"abe": 1, "Abe": 2}


def test_update_renames_and_sets_value(sqlite_repo, seed):
    seed(("Abe", 1), ("Bob", 2))
    sqlite_repo.update(original_name="Abe", new_name="Abel", value=7)
    assert _as_dict(sqlite_repo) == {"Abel": 7, "Bob": 2}


def test_update_to_same_name_changes_value(sqlite_repo, seed):
    seed(("Abe", 1))
    sqlite_repo.update(original_name="Abe", new_name="Abe", value=1)
    sqlite_repo.update(original_name="Abe", new_name="Abe", value=5)
    assert _as_dict(sqlite_repo) == {"Abe": 5}


def test_update_missing_raises_not_found(sqlite_repo, seed):
    seed(("Abe", 1), ("Y", 3))
    with pytest.raises(NotFoundError):
        sqlite_repo.update(original_name="X", new_name="Y", value=5)
    assert _as_dict(sqlite_repo) == {"Abe": 1, "Y": 3}


def test_update_collision_raises_conflict_and_rolls_back(sqlite_repo, seed):
    seed(("Abe", 1), ("Bob", 2))
    with pytest.raises(ConflictError):
        sqlite_repo.update(original_name="Abe", new_name="Bob", value=9)
    assert _as_dict(sqlite_repo) == {"Abe": 1, "Bob": 2}


def test_delete_removes_only_that_record(sqlite_repo, seed):
    seed(("Abe", 1), ("Bob", 2))
    sqlite_repo.delete("Abe")
    assert _as_dict(sqlite_repo) == {"Bob": 2}


def test_delete_missing_raises_not_found(sqlite_repo, seed):
    seed(("Abe", 1))
    with pytest.raises(NotFoundError):
        sqlite_repo.delete("abe")
    assert _as_dict(sqlite_repo) == {"Abe": 1}


def test_increment_rule_applies_bucket_deltas(sqlite_repo, seed):
    seed(("Eve", 1), ("Gia", 2), ("Bob", 3), ("eve", 4), ("gus", 5))

    rows = sqlite_repo.apply_increment_rule(IncrementRule())

    assert rows == 5
    assert _as_dict(sqlite_repo) == {"Eve": 2, "Gia": 12, "Bob": 103, "eve": 104, "gus": 105}


def test_increment_rule_twice_adds_twice(sqlite_repo, seed):
    seed(("Eve", 1), ("Gia", 2), ("Bob", 3))
    sqlite_repo.apply_increment_rule(IncrementRule())
    sqlite_repo.apply_increment_rule(IncrementRule())
    assert _as_dict(sqlite_repo) == {"Eve": 3, "Gia": 22, "Bob": 203}


def test_increment_rule_on_empty_table(sqlite_repo):
    assert sqlite_repo.apply_increment_rule(IncrementRule()) == 0


def test_increment_rule_overflow_rolls_back_everything(sqlite_repo, seed):
    seed(("Eve", 1), ("Bob", 2**63 - 50))
    with pytest.raises(StorageError):
        sqlite_repo.apply_increment_rule(IncrementRule())
    assert _as_dict(sqlite_repo) == {"Eve": 1, "Bob": 2**63 - 50}


def test_grouped_sum_example(sqlite_repo, seed):
    seed(("Abe", 5000), ("Ann", 6200), ("Bob", 20000))
    result = sqlite_repo.grouped_sum(prefixes=("A", "B", "C"), threshold=11171)
    assert result == [AbcSum("A", 11200), AbcSum("B", 20000)]


def test_grouped_sum_empty(sqlite_repo, seed):
    seed(("Zed", 50000), ("abe", 50000))
    assert sqlite_repo.grouped_sum(prefixes=("A", "B", "C"), threshold=11171) == []
    assert sqlite_repo.grouped_sum(prefixes=(), threshold=0) == []


def test_grouped_sum_matches_listing_recomputation(sqlite_repo, seed):
    seed(
        ("Abe", 5000), ("Ann", 6200), ("Amy", -100), ("Bob", 11171), ("Bea", -1),
        ("Cy", 11171), ("cal", 90000), ("Dan", 99999), ("Eve", 3), ("Émile", 12000),
        ("Zed", 2**63 - 1), ("Zoe", 2**63 - 1), ("Yul", -(2**63)), ("Yan", -(2**63)),
    )
    for prefixes in [("A", "B", "C"), ("C",), ("É", "D"), ("a", "c"), ("Y", "Z")]:
        for threshold in [-(2**70), -(2**64), -1000, 0, 11100, 11171, 11172, 100000, 2**64 - 2, 2**70]:
            store = sqlite_repo.grouped_sum(prefixes=prefixes, threshold=threshold)
            client = grouped_sum(sqlite_repo.list_all(), prefixes, threshold)
            assert list(store) == client, (prefixes, threshold)


def test_grouped_sum_totals_past_64_bits(sqlite_repo, seed):
    seed(("Ann", 2**63 - 1), ("Abe", 2**63 - 1), ("Bob", -(2**63)), ("Bea", -(2**63)))

    assert sqlite_repo.grouped_sum(prefixes=("A", "B"), threshold=-(2**65)) == [
        AbcSum("A", 2**64 - 2),
        AbcSum("B", -(2**64)),
    ]
    assert sqlite_repo.grouped_sum(prefixes=("A",), threshold=2**64 - 1) == []


def test_unreachable_database_raises_storage_error(tmp_path):
    repo = SQLEmployeeRepository(SQLiteConnection(tmp_path / "missing-dir" / "db.sqlite"))
    with pytest.raises(StorageError):
        repo.list_all()


def test_missing_table_raises_storage_error(tmp_path):
    repo = SQLEmployeeRepository(SQLiteConnection(tmp_path / "empty.db"))
    with pytest.raises(StorageError):
        repo.list_all()


def test_concurrent_readers_never_see_partial_increment(sqlite_db, sqlite_repo, seed):
    seed(("Eve", 0), ("Gia", 0), ("Bob", 0))
    rounds = 25
    errors: list[str] = []
    done = threading.Event()

    def writer():
        repo = SQLEmployeeRepository(sqlite_db)
        try:
            for _ in range(rounds):
                repo.apply_increment_rule(IncrementRule())
        finally:
            done.set()

    def reader():
        repo = SQLEmployeeRepository(sqlite_db)
        while not done.is_set():
            snap = _as_dict(repo)
            # After k applications the state is exactly (k, 10k, 100k).
            if not (snap["Gia"] == 10 * snap["Eve"] and snap["Bob"] == 100 * snap["Eve"]):
                errors.append(repr(snap))

    threads = [threading.Thread(target=writer)] + [threading.Thread(target=reader) for _ in range(3)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=60)

    assert errors == []
    assert _as_dict(sqlite_repo) == {"Eve": rounds, "Gia": 10 * rounds, "Bob": 100 * rounds}


def test_concurrent_writers_all_apply(sqlite_db, sqlite_repo, seed):
    seed(("Eve", 0), ("Bob", 0))
    workers, per_worker = 4, 10

    def writer():
        repo = SQLEmployeeRepository(sqlite_db)
        for _ in range(per_worker):
            repo.apply_increment_rule(IncrementRule())

    threads = [threading.Thread(target=writer) for _ in range(workers)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=60)

    total = workers * per_worker
    assert _as_dict(sqlite_repo) == {"Eve": total, "Bob": 100 * total}


def test_service_abc_sums_paths_agree_past_64_bits(sqlite_repo, seed):
    seed(("Ann", 2**63 - 1), ("Abe", 2**63 - 1))
    svc = EmployeeService(sqlite_repo)

    expected = [AbcSum("A", 2**64 - 2)]
    assert svc.compute_abc_sums(["A"], 0) == expected
    assert svc.compute_abc_sums(["A"], 0, recompute=True) == expected
