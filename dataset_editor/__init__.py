"""
Top-level package for the tabular dataset editor.

This package exposes the editing engine (dataset model, transformations,
undo/redo history) and the chart aggregation pipeline.
Most code should import from submodules such as:
    dataset_editor.core
    dataset_editor.operations
    dataset_editor.services
    dataset_editor.charts

Applications embedding the editor call `configure_logging()` once at startup;
the library itself never installs handlers.
"""

from dataset_editor.logging_config import configure_logging

__all__: list[str] = ["configure_logging"]
