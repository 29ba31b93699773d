"""Domain layer — pure Python, no framework dependencies."""

from coding_specialist.domain.models import ACTIONS, ActionInfo, ActionType, InputPair, Report
from coding_specialist.domain.heuristics import count_functions, detect_language
from coding_specialist.domain.templates import (
    GENERATORS,
    WARNINGS,
    debug_code,
    expand_code,
    generate_analysis,
    generate_code,
    improve_code,
    refactor_code,
)
from coding_specialist.domain.dispatcher import Dispatcher, build_report, generate

__all__ = [
    "ACTIONS",
    "ActionInfo",
    "ActionType",
    "InputPair",
    "Report",
    "count_functions",
    "detect_language",
    "GENERATORS",
    "WARNINGS",
    "debug_code",
    "expand_code",
    "generate_analysis",
    "generate_code",
    "improve_code",
    "refactor_code",
    "Dispatcher",
    "build_report",
    "generate",
]
