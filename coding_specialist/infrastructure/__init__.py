"""Infrastructure — runtime implementations of the outbound ports."""

from coding_specialist.infrastructure.delay import ProcessingDelay

__all__ = ["ProcessingDelay"]
