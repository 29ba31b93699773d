"""AI Coding Specialist — canned code-feedback demo package."""

from coding_specialist.config import CONFIG, AppConfig, __version__
from coding_specialist.domain.models import ACTIONS, ActionInfo, ActionType, InputPair, Report
from coding_specialist.domain.dispatcher import Dispatcher, build_report
from coding_specialist.domain.heuristics import count_functions, detect_language
from coding_specialist.infrastructure.delay import ProcessingDelay

__all__ = [
    "CONFIG",
    "AppConfig",
    "__version__",
    "ACTIONS",
    "ActionInfo",
    "ActionType",
    "InputPair",
    "Report",
    "Dispatcher",
    "build_report",
    "count_functions",
    "detect_language",
    "ProcessingDelay",
]
