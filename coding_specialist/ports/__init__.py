"""Port interfaces (Hexagonal Architecture)."""

from coding_specialist.ports.outbound import Clock, DelayPort

__all__ = [
    "Clock",
    "DelayPort",
]
