"""Configuration and shared state."""

__version__ = "0.1.0"

import os
import sys
import uuid
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

_stderr_print = lambda *a, **kw: print(*a, **kw, file=sys.stderr)

DEFAULT_PROCESSING_DELAY_MS = 1500


def _read_delay_ms(raw: str) -> int:
    """Parse PROCESSING_DELAY_MS, falling back to the default on bad input."""
    try:
        value = int(raw.strip())
    except ValueError:
        _stderr_print(
            f"Invalid PROCESSING_DELAY_MS={raw!r}, "
            f"falling back to {DEFAULT_PROCESSING_DELAY_MS}"
        )
        return DEFAULT_PROCESSING_DELAY_MS
    if value < 0:
        _stderr_print(
            f"Negative PROCESSING_DELAY_MS={value}, "
            f"falling back to {DEFAULT_PROCESSING_DELAY_MS}"
        )
        return DEFAULT_PROCESSING_DELAY_MS
    return value


CONFIG = {
    "port": int(os.getenv("PORT", "3000")),
    "host": os.getenv("HOST", "0.0.0.0"),
    "session_id": str(uuid.uuid4()),
    # Artificial "thinking" pause before a report is shown
    "processing_delay_ms": _read_delay_ms(
        os.getenv("PROCESSING_DELAY_MS", str(DEFAULT_PROCESSING_DELAY_MS))
    ),
}


@dataclass
class AppConfig:
    """Typed view of CONFIG."""

    port: int = 3000
    host: str = "0.0.0.0"
    session_id: str = ""
    processing_delay_ms: int = DEFAULT_PROCESSING_DELAY_MS

    @property
    def processing_delay_seconds(self) -> float:
        return self.processing_delay_ms / 1000

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Create AppConfig from environment variables."""
        return cls(
            port=int(os.getenv("PORT", str(CONFIG["port"]))),
            host=os.getenv("HOST", CONFIG["host"]),
            session_id=CONFIG["session_id"],
            processing_delay_ms=_read_delay_ms(
                os.getenv("PROCESSING_DELAY_MS", str(CONFIG["processing_delay_ms"]))
            ),
        )
