from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from dataset_editor.core.dataset import Dataset


@dataclass(frozen=True)
class ValidationIssue:
    code: str
    message: str


@dataclass
class ValidationReport:
    """
    Outcome of checking an imported Dataset.

    Errors mean the import is unusable (empty file, no columns). Warnings are
    informational; the editor accepts the dataset either way.
    """
    errors: List[ValidationIssue] = field(default_factory=list)
    warnings: List[ValidationIssue] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.errors


def validate_dataset(dataset: Dataset) -> ValidationReport:
    """
    Check an imported Dataset for problems an importer should surface.

    - error  "empty":            no records
    - error  "no_columns":       no columns
    - warning "empty_column":    a column with no non-null values
    - warning "undeclared_key":  a record key with no matching Column
    - warning "duplicate_column": two columns sharing a name
    """
    report = ValidationReport()

    if dataset.rows == 0:
        report.errors.append(ValidationIssue("empty", "The file appears to be empty."))

    if not dataset.columns:
        report.errors.append(ValidationIssue("no_columns", "No columns detected in the file."))

    seen: set[str] = set()
    for col in dataset.columns:
        if col.name in seen:
            report.warnings.append(
                ValidationIssue("duplicate_column", f'Column "{col.name}" is declared more than once.')
            )
        seen.add(col.name)

        if all(v is None for v in dataset.column_values(col.name)):
            report.warnings.append(
                ValidationIssue("empty_column", f'Column "{col.name}" has no values (all empty).')
            )

    undeclared: List[str] = []
    for row in dataset.data:
        for key in row:
            if key not in seen and key not in undeclared:
                undeclared.append(key)

    for key in undeclared:
        report.warnings.append(
            ValidationIssue("undeclared_key", f'Record key "{key}" is not described by any column.')
        )

    return report
