# tests/test_task_list.py

from __future__ import annotations

from datetime import date

import pytest

from todo_tracker.tasks.task_list import DuplicateTaskError, TaskList
from todo_tracker.tasks.task_models import Task
from todo_tracker.tasks.task_store import StoreWriteError, TaskStore

from .fakes import FakeTaskRepo


def _titles(tasks) -> list[str]:
    return [t.title for t in tasks]


def test_store_matches_list_after_every_mutation(store: TaskStore) -> None:
    tasks = TaskList.load(store)
    steps = [
        ("add", "one"),
        ("add", "two"),
        ("add", "three"),
        ("remove", "two"),
        ("remove", "missing"),
        ("add", "four"),
        ("remove", "one"),
    ]

    for op, title in steps:
        if op == "add":
            tasks.add(Task(title=title))
        else:
            tasks.remove(title)
        tasks.sync()
        assert {t.title for t in store.load_all()} == set(_titles(tasks))

    assert _titles(tasks) == ["three", "four"]


def test_add_persists_without_explicit_sync(store: TaskStore, task_a: Task) -> None:
    tasks = TaskList.load(store)
    tasks.add(task_a)

    assert TaskList.load(store).snapshot() == (task_a,)


def test_remove_then_find_is_empty(store: TaskStore, task_a: Task, task_b: Task) -> None:
    tasks = TaskList.load(store)
    tasks.add(task_a)
    tasks.add(task_b)

    removed = tasks.remove("Task A")

    assert removed == task_a
    assert tasks.find("Task A") is None
    assert "Task A" not in tasks
    assert _titles(store.load_all()) == ["Task B"]


def test_add_then_remove_leaves_empty_snapshot(store: TaskStore, task_a: Task) -> None:
    tasks = TaskList.load(store)
    tasks.add(task_a)
    tasks.remove("Task A")

    assert tasks.find("Task A") is None
    assert tasks.snapshot() == ()
    assert store.load_all() == []


def test_remove_unknown_title_is_a_no_op(task_a: Task) -> None:
    repo = FakeTaskRepo([task_a])
    tasks = TaskList.load(repo)

    assert tasks.remove("nope") is None
    assert tasks.snapshot() == (task_a,)


def test_scenario_sort_two_tasks(task_a: Task, task_b: Task) -> None:
    tasks = TaskList(FakeTaskRepo())
    tasks.add(task_a)
    tasks.add(task_b)

    tasks.sort_by_priority()
    assert _titles(tasks) == ["Task B", "Task A"]

    tasks.sort_by_due_date()
    assert _titles(tasks) == ["Task B", "Task A"]


def test_sort_by_priority_is_stable() -> None:
    tasks = TaskList(
        FakeTaskRepo(),
        [
            Task(title="a", priority=2),
            Task(title="b", priority=1),
            Task(title="c", priority=2),
            Task(title="d", priority=1),
            Task(title="e", priority=0),
        ],
    )

    tasks.sort_by_priority()

    assert _titles(tasks) == ["e", "b", "d", "a", "c"]


def test_sort_by_due_date_orders_and_is_idempotent() -> None:
    tasks = TaskList(
        FakeTaskRepo(),
        [
            Task(title="late", due_date=date(2024, 3, 1)),
            Task(title="early", due_date=date(2023, 12, 31)),
            Task(title="same-1", due_date=date(2024, 1, 15)),
            Task(title="undated"),
            Task(title="same-2", due_date=date(2024, 1, 15)),
        ],
    )

    tasks.sort_by_due_date()
    first = tasks.snapshot()
    dues = [t.due_date for t in first]
    assert dues == sorted(dues)
    assert _titles(first) == ["undated", "early", "same-1", "same-2", "late"]

    tasks.sort_by_due_date()
    assert tasks.snapshot() == first


def test_sorting_does_not_touch_the_store(task_a: Task, task_b: Task) -> None:
    repo = FakeTaskRepo([task_a, task_b], fail_writes=True)
    tasks = TaskList.load(repo)

    tasks.sort_by_priority()
    tasks.sort_by_due_date()

    assert repo.calls == []


def test_mark_complete_absent_title_changes_nothing(task_a: Task) -> None:
    repo = FakeTaskRepo([task_a])
    tasks = TaskList.load(repo)

    assert tasks.mark_complete("X") is None
    assert tasks.snapshot() == (task_a,)
    assert repo.calls == []


def test_mark_complete_is_persisted(store: TaskStore, task_a: Task, task_b: Task) -> None:
    tasks = TaskList.load(store)
    tasks.add(task_a)
    tasks.add(task_b)

    done = tasks.mark_complete("Task A")

    assert done is not None and done.status is True
    assert tasks.find("Task A").status is True
    reloaded = {t.title: t.status for t in store.load_all()}
    assert reloaded == {"Task A": True, "Task B": False}


def test_mark_complete_rewrites_row_missing_from_store(store: TaskStore, task_a: Task) -> None:
    tasks = TaskList.load(store)
    tasks.add(task_a)
    store.delete_by_title("Task A")

    tasks.mark_complete("Task A")

    assert [(t.title, t.status) for t in store.load_all()] == [("Task A", True)]


def test_duplicate_title_is_rejected(store: TaskStore, task_a: Task) -> None:
    tasks = TaskList.load(store)
    tasks.add(task_a)

    with pytest.raises(DuplicateTaskError):
        tasks.add(Task(title="Task A", description="again"))

    assert tasks.snapshot() == (task_a,)
    assert store.load_all() == [task_a]


def test_failed_add_leaves_list_unchanged(task_a: Task, task_b: Task) -> None:
    repo = FakeTaskRepo([task_a])
    tasks = TaskList.load(repo)
    repo.fail_writes = True

    with pytest.raises(StoreWriteError):
        tasks.add(task_b)

    assert tasks.snapshot() == (task_a,)


def test_failed_remove_keeps_task(task_a: Task) -> None:
    repo = FakeTaskRepo([task_a], fail_writes=True)
    tasks = TaskList.load(repo)

    with pytest.raises(StoreWriteError):
        tasks.remove("Task A")

    assert tasks.find("Task A") == task_a


def test_failed_complete_keeps_task_pending(task_a: Task) -> None:
    repo = FakeTaskRepo([task_a], fail_writes=True)
    tasks = TaskList.load(repo)

    with pytest.raises(StoreWriteError):
        tasks.mark_complete("Task A")

    assert tasks.find("Task A").status is False


def test_find_returns_first_match_in_current_order() -> None:
    # Duplicates can only come from outside add(); lookup still takes the first one.
    first = Task(title="dup", priority=5)
    second = Task(title="dup", priority=1)
    tasks = TaskList(FakeTaskRepo(), [first, second])

    assert tasks.find("dup") is first
    tasks.sort_by_priority()
    assert tasks.find("dup") is second
