from __future__ import annotations

import pytest

from dataset_editor.config import EditorSettings
from dataset_editor.core.dataset import Dataset
from dataset_editor.core.exceptions import UnknownOperationError
from dataset_editor.services.editor_service import DatasetEditor


def _make_dataset(name: str = "funnel") -> Dataset:
    return Dataset.from_records(
        name,
        [("step", "string"), ("users", "number")],
        [
            {"step": "Visit", "users": 100},
            {"step": "Signup", "users": 40},
            {"step": "Signup", "users": 40},
        ],
    )


def _loaded_editor(**settings) -> DatasetEditor:
    editor = DatasetEditor(EditorSettings(**settings)) if settings else DatasetEditor()
    editor.load(_make_dataset())
    return editor


def test_load_resets_history():
    editor = _loaded_editor()

    assert editor.dataset == _make_dataset()
    assert editor.history_length == 1
    assert editor.current_history_index == 0
    assert editor.history_descriptions == ["Initial import"]
    assert not editor.can_undo
    assert not editor.can_redo


def test_load_none_clears_everything():
    editor = _loaded_editor()
    editor.remove_column("users")
    editor.load(None)

    assert editor.dataset is None
    assert editor.original is None
    assert editor.history_length == 0
    assert editor.current_history_index == -1
    assert not editor.can_undo
    assert not editor.can_redo


def test_operations_without_dataset_do_nothing():
    editor = DatasetEditor()

    assert editor.remove_column("users") is None
    assert editor.fill_nulls("users", 0) is None
    editor.undo()
    editor.redo()
    editor.reset_to_original()

    assert editor.dataset is None
    assert editor.history_length == 0


def test_undo_redo_round_trip():
    editor = _loaded_editor()
    d0 = editor.dataset

    editor.commit(d0.evolve(data=d0.data[:1]), "x")
    d1 = editor.dataset

    editor.undo()
    assert editor.dataset == d0
    assert editor.can_redo

    editor.redo()
    assert editor.dataset == d1
    assert not editor.can_redo


def test_undo_at_start_and_redo_at_end_are_no_ops():
    editor = _loaded_editor()
    editor.undo()
    assert editor.current_history_index == 0

    editor.rename_column("step", "stage")
    editor.redo()
    assert editor.current_history_index == 1
    assert editor.dataset.column_names == ["stage", "users"]


def test_commit_after_undo_discards_redo_branch():
    editor = _loaded_editor()
    editor.remove_duplicates()
    editor.rename_column("step", "stage")
    editor.fill_nulls("users", 0)

    editor.undo()
    editor.undo()
    assert editor.current_history_index == 1

    editor.remove_column("users")

    assert editor.history_length == editor.current_history_index + 1
    assert editor.history_descriptions == [
        "Initial import",
        "Removed 1 duplicate rows",
        'Removed column "users"',
    ]
    assert not editor.can_redo


def test_capacity_eviction_after_51_commits():
    editor = _loaded_editor()
    for i in range(51):
        editor.commit(_make_dataset(f"v{i}"), f"edit {i}")

    assert editor.history_length == 50
    assert editor.current_history_index == 49

    while editor.can_undo:
        editor.undo()

    # the initial import and the first edit fell off the timeline
    assert editor.current_history_index == 0
    assert editor.dataset.name == "v1"
    assert editor.history_descriptions[0] == "edit 1"


def test_capacity_comes_from_settings():
    editor = _loaded_editor(history_capacity=3)
    for i in range(5):
        editor.commit(_make_dataset(f"v{i}"), f"edit {i}")

    assert editor.history_length == 3


def test_no_op_operations_do_not_add_history():
    editor = _loaded_editor()

    assert editor.rename_column("step", "step") is None
    assert editor.remove_column("ghost") is None
    assert editor.history_length == 1


def test_reset_to_original_is_undoable():
    editor = _loaded_editor()
    editor.remove_column("users")
    edited = editor.dataset

    editor.reset_to_original()

    assert editor.dataset == _make_dataset()
    assert editor.history_descriptions[-1] == "Reset to original"

    editor.undo()
    assert editor.dataset == edited


def test_original_snapshot_is_isolated_from_caller():
    ds = _make_dataset()
    editor = DatasetEditor()
    editor.load(ds)
    ds.data[0]["users"] = -1

    assert editor.original.data[0]["users"] == 100


def test_restored_dataset_cannot_mutate_history():
    editor = _loaded_editor()
    editor.remove_duplicates()
    editor.undo()

    editor.dataset.data[0]["users"] = -1
    editor.redo()
    editor.undo()

    assert editor.dataset.data[0]["users"] == 100


def test_apply_and_preview():
    editor = _loaded_editor()

    preview = editor.preview("remove_duplicates")
    assert preview.dataset.rows == 2
    assert editor.history_length == 1

    result = editor.apply("change_column_type", name="users", new_type="string")
    assert result.description == 'Changed column "users" type to string'
    assert editor.dataset.column_values("users") == ["100", "40", "40"]
    assert editor.history_length == 2

    with pytest.raises(UnknownOperationError):
        editor.apply("explode")


def test_convenience_methods_commit():
    editor = _loaded_editor()

    editor.find_and_replace("step", "sign", "Join")
    editor.trim_whitespace()
    editor.remove_row(0)
    editor.remove_rows([0])
    editor.filter_rows(lambda r: True, "Kept all rows")
    editor.change_column_type("users", "number")
    editor.reorder_columns(["users", "step"])
    editor.remove_null_rows("users")

    assert editor.history_length == 9
    assert editor.dataset.column_names == ["users", "step"]
    assert editor.dataset.data == ({"step": "Joinup", "users": 40},)


def test_editors_are_independent():
    a = _loaded_editor()
    b = _loaded_editor()

    a.remove_column("users")

    assert b.dataset.column_names == ["step", "users"]
    assert b.history_length == 1
