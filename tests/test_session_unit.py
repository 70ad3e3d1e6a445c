from pathlib import Path

import pytest

from core import Browsing, Editing, Selecting, TaskRecord
from core.desktop.devtools.application.session import Intent, TodoSession
from core.desktop.devtools.application.task_document import TaskDocument
from infrastructure.file_repository import TodoFileError

from conftest import MemoryStore, make_document


def run(session, *intents):
    for intent in intents:
        if isinstance(intent, str):
            for ch in intent:
                session.dispatch(Intent.INSERT_CHAR, ch)
        else:
            session.dispatch(intent)


def test_every_intent_maps_to_an_editor_operation():
    session = TodoSession(make_document("a"))
    for intent in Intent:
        assert callable(getattr(session.editor, intent.value))


def test_scenario_append_type_commit_persists(tmp_path: Path):
    path = tmp_path / "todo.txt"
    path.write_text("x buy milk\ncook dinner\n", encoding="utf-8")
    session = TodoSession.open(path)
    assert session.document.tasks == [TaskRecord(True, "buy milk"), TaskRecord(False, "cook dinner")]

    run(session, Intent.SELECT_FIRST, Intent.APPEND_AFTER)
    assert session.mode == Editing(1, 0, "")
    # the placeholder is not persisted before commit
    assert path.read_text(encoding="utf-8") == "x buy milk\ncook dinner\n"

    run(session, "eat", Intent.COMMIT)
    assert session.mode == Selecting(1)
    assert session.document.tasks[1] == TaskRecord(False, "eat")
    assert path.read_text(encoding="utf-8") == "x buy milk\n  eat\n  cook dinner\n"
    assert session.editor.dirty is False


def test_toggle_saves_immediately(todo_file: Path):
    session = TodoSession.open(todo_file)
    run(session, Intent.SELECT_NEXT, Intent.TOGGLE)
    assert todo_file.read_text(encoding="utf-8").splitlines()[0] == "  buy milk"


def test_delete_last_task_then_keep_going(tmp_path: Path):
    path = tmp_path / "todo.txt"
    path.write_text("  only\n", encoding="utf-8")
    session = TodoSession.open(path)
    run(session, Intent.SELECT_FIRST, Intent.DELETE)
    assert session.document.tasks == []
    assert session.mode == Browsing()
    assert path.read_text(encoding="utf-8") == ""
    assert session.dispatch(Intent.SELECT_NEXT) is False
    assert session.dispatch(Intent.TOGGLE) is False
    assert session.dispatch(Intent.EDIT) is False


def test_navigation_does_not_save():
    store = MemoryStore()
    session = TodoSession(TaskDocument("todo.txt", [TaskRecord(False, "a"), TaskRecord(False, "b")], store=store))
    run(session, Intent.SELECT_FIRST, Intent.SELECT_NEXT, Intent.EDIT, "!", Intent.CANCEL)
    assert store.saves == []


def test_at_most_one_save_per_dispatch():
    store = MemoryStore()
    session = TodoSession(TaskDocument("todo.txt", [TaskRecord(False, "a")], store=store))
    run(session, Intent.SELECT_FIRST, Intent.TOGGLE, Intent.TOGGLE)
    assert len(store.saves) == 2
    assert store.saves[-1] == [TaskRecord(False, "a")]


def test_dispatch_reports_redraw():
    session = TodoSession(make_document("a"))
    assert session.dispatch(Intent.SELECT_FIRST) is True
    assert session.dispatch(Intent.SELECT_PREV) is False
    assert session.dispatch(Intent.INSERT_CHAR) is False


def test_save_failure_propagates():
    store = MemoryStore(fail_on_save=True)
    session = TodoSession(TaskDocument("todo.txt", [TaskRecord(False, "a")], store=store))
    session.dispatch(Intent.SELECT_FIRST)
    with pytest.raises(TodoFileError):
        session.dispatch(Intent.TOGGLE)
    assert session.editor.dirty is True


def test_quit_stops_without_saving():
    store = MemoryStore()
    session = TodoSession(TaskDocument("todo.txt", [TaskRecord(False, "a")], store=store))
    session.dispatch(Intent.QUIT)
    assert session.running is False
    assert store.saves == []


@pytest.mark.parametrize(
    "typed, stored",
    [("xbox", "xbox"), ("x", "x"), ("x marks the spot", "x marks the spot"), (" eat ", "eat")],
)
def test_reload_matches_memory_after_commit(tmp_path: Path, typed, stored):
    path = tmp_path / "todo.txt"
    path.write_text("x buy milk\n", encoding="utf-8")
    session = TodoSession.open(path)
    run(session, Intent.APPEND_AFTER, typed, Intent.COMMIT)
    assert session.document.tasks[-1] == TaskRecord(False, stored)
    assert TaskDocument.load(path).tasks == session.document.tasks


def test_reload_matches_memory_after_toggling_x_task(tmp_path: Path):
    path = tmp_path / "todo.txt"
    path.write_text("  xbox\n", encoding="utf-8")
    session = TodoSession.open(path)
    run(session, Intent.SELECT_FIRST, Intent.TOGGLE)
    assert path.read_text(encoding="utf-8") == "x xbox\n"
    run(session, Intent.TOGGLE)
    assert TaskDocument.load(path).tasks == [TaskRecord(False, "xbox")]
