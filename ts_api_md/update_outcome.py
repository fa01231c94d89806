"""Data models for the result of updating one class section."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class UpdateStatus(Enum):
    """Whether a class section was written."""

    UPDATED = "updated"
    MARKERS_NOT_FOUND = "markers_not_found"


@dataclass(frozen=True)
class UpdateOutcome:
    """Represents the outcome of writing one class into a document."""

    class_name: str
    status: UpdateStatus
    path: Path

    @property
    def ok(self) -> bool:
        """Return True when the section was written."""
        return self.status is UpdateStatus.UPDATED
