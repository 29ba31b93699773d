"""Domain data models — pure Python dataclasses."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import List


class ActionType(str, Enum):
    """The six canned operations a user can request."""

    ANALYZE = "analyze"
    WRITE = "write"
    IMPROVE = "improve"
    REFACTOR = "refactor"
    DEBUG = "debug"
    EXPAND = "expand"


@dataclass(frozen=True)
class InputPair:
    """Current editor contents, read-only from the engine's side."""

    code: str = ""
    prompt: str = ""


@dataclass(frozen=True)
class Report:
    """Result of one dispatch. Superseded, never mutated."""

    action: ActionType
    result: str
    timestamp: datetime

    def to_dict(self) -> dict:
        return {
            "type": self.action.value,
            "result": self.result,
            "timestamp": self.timestamp.isoformat(),
        }


@dataclass(frozen=True)
class ActionInfo:
    """Button metadata shown by the page."""

    action: ActionType
    label: str
    description: str


ACTIONS: List[ActionInfo] = [
    ActionInfo(ActionType.ANALYZE, "Analyze", "Deep analysis of code quality"),
    ActionInfo(ActionType.WRITE, "Write", "Generate new code from prompt"),
    ActionInfo(ActionType.IMPROVE, "Improve", "Enhance existing code"),
    ActionInfo(ActionType.REFACTOR, "Refactor", "Restructure for maintainability"),
    ActionInfo(ActionType.DEBUG, "Debug", "Find and fix issues"),
    ActionInfo(ActionType.EXPAND, "Expand", "Add features and functionality"),
]
