"""Pydantic models for processing reports.

These describe what happened to each file; the CLI can dump them as JSON.
The fields mirror what the upload service returned for each operation.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field, computed_field


class OperationReport(BaseModel):
    """Outcome of one successfully processed file."""
    operation: str
    source: str
    output: str
    original_size: tuple[int, int]
    new_size: tuple[int, int]
    parameters: dict[str, Any] = Field(default_factory=dict)
    metadata: dict[str, Any] = Field(default_factory=dict)
    processed_at: datetime = Field(default_factory=datetime.now)


class FailureReport(BaseModel):
    """A file that could not be processed."""
    source: str
    error: str


class BatchReport(BaseModel):
    """Outcome of a batch run over many files."""
    operation: str
    reports: list[OperationReport] = Field(default_factory=list)
    failures: list[FailureReport] = Field(default_factory=list)

    @computed_field
    @property
    def succeeded(self) -> int:
        return len(self.reports)

    @computed_field
    @property
    def failed(self) -> int:
        return len(self.failures)
