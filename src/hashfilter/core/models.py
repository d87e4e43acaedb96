"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/models.py
Data models for duplicate filtering: conflict policies, run parameters and statistics.
"""

from dataclasses import dataclass, field
from typing import Optional
from enum import Enum


# =============================
# Enums
# =============================

class ConflictAction(Enum):
    """
    What to do with a file whose content has already been seen in this run.
    """
    DELETE = "delete"
    ASK = "ask"
    INFORM = "inform"
    MOVE = "move"

    @property
    def display_name(self) -> str:
        """Human-readable name for console output."""
        mapping = {
            ConflictAction.DELETE: "Delete",
            ConflictAction.ASK: "Ask",
            ConflictAction.INFORM: "Inform",
            ConflictAction.MOVE: "Move",
        }
        return mapping.get(self, self.value)

    def __repr__(self) -> str:
        return self.value


# ======================
#  Core Data Models
# ======================

@dataclass(frozen=True)
class Policy:
    """
    Conflict-resolution policy, chosen once before the run.
    `destination` is only meaningful (and required) for MOVE.
    `trash` makes the delete action use the system trash instead of unlinking.
    """
    action: ConflictAction = ConflictAction.DELETE
    destination: Optional[str] = None
    trash: bool = False

    def __post_init__(self):
        if self.action is ConflictAction.MOVE and not self.destination:
            raise ValueError("Move policy requires a destination folder")
        if self.action is not ConflictAction.MOVE and self.destination is not None:
            raise ValueError(f"Destination folder is only valid for the move policy, not '{self.action.value}'")

    @classmethod
    def delete(cls, trash: bool = False) -> "Policy":
        return cls(ConflictAction.DELETE, trash=trash)

    @classmethod
    def ask(cls, trash: bool = False) -> "Policy":
        return cls(ConflictAction.ASK, trash=trash)

    @classmethod
    def inform(cls) -> "Policy":
        return cls(ConflictAction.INFORM)

    @classmethod
    def move(cls, destination: str) -> "Policy":
        return cls(ConflictAction.MOVE, destination=destination)

    def describe(self) -> str:
        if self.action is ConflictAction.MOVE:
            return f"{self.action.display_name} to {self.destination}"
        if self.trash and self.action in (ConflictAction.DELETE, ConflictAction.ASK):
            return f"{self.action.display_name} (to trash)"
        return self.action.display_name


@dataclass(frozen=True)
class Lookup:
    """
    Result of a registry query.
    position is the index of the matching digest when found, otherwise the insertion point.
    """
    found: bool
    position: int


@dataclass
class RunStats:
    """
    Counters collected while classifying files.
    """
    files_seen: int = 0
    unique: int = 0
    duplicates: int = 0
    skipped: int = 0
    total_time: float = 0.0

    def print_summary(self) -> str:
        lines = [
            "📊 Run Statistics:",
            f"Total Execution Time: {self.total_time:.3f}s",
            f"Files checked: {self.files_seen}",
            f"Unique contents: {self.unique}",
            f"Duplicates resolved: {self.duplicates}",
            f"Unreadable (skipped): {self.skipped}",
        ]
        return "\n".join(lines)


"""
DTO for a filtering run with built-in validation.
Interface-agnostic: built by the CLI or by library callers.
"""

@dataclass
class FilterParams:
    """Parameters for a filtering run with validation."""
    folder: str
    policy: Policy = field(default_factory=Policy)

    def __post_init__(self):
        """Validate parameters immediately after creation."""
        if not self.folder:
            raise ValueError("Folder cannot be empty")
        if not isinstance(self.policy, Policy):
            raise ValueError("policy must be a Policy instance")
