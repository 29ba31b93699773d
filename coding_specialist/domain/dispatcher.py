"""Action dispatcher — maps an action to its generator and wraps the result.

Pure domain logic; the processing pause comes in through DelayPort.
"""

import sys
import time
from datetime import datetime
from typing import Optional, Union

from coding_specialist.domain.models import ActionType, InputPair, Report
from coding_specialist.domain.templates import GENERATORS
from coding_specialist.ports.outbound import Clock, DelayPort


def _log(msg: str):
    print(msg, file=sys.stderr)


def generate(action: Union[ActionType, str], inputs: InputPair) -> str:
    """Run the generator for ``action`` over ``inputs``."""
    return GENERATORS[ActionType(action)](inputs.code, inputs.prompt)


def build_report(
    action: Union[ActionType, str],
    inputs: InputPair,
    now: Optional[datetime] = None,
) -> Report:
    """Generate the text for ``action`` and stamp it. No delay."""
    action = ActionType(action)
    return Report(
        action=action,
        result=generate(action, inputs),
        timestamp=now or datetime.now(),
    )


class Dispatcher:
    """Holds the current report and publishes new ones after the delay.

    Dispatches are independent: none is queued or cancelled by another,
    and whichever finishes last becomes ``current``.
    """

    def __init__(self, delay: Optional[DelayPort] = None, clock: Clock = datetime.now):
        self.delay = delay
        self._clock = clock
        self.current: Optional[Report] = None
        self._in_flight = 0

    @property
    def is_processing(self) -> bool:
        return self._in_flight > 0

    async def dispatch(
        self,
        action: Union[ActionType, str],
        code: str = "",
        prompt: str = "",
    ) -> Report:
        """Build a report, wait out the delay, then publish it."""
        action = ActionType(action)
        started = time.monotonic()
        _log(f"[{datetime.now().isoformat()}] Dispatching {action.value}")

        self._in_flight += 1
        try:
            report = build_report(action, InputPair(code=code, prompt=prompt), now=self._clock())
            if self.delay is not None:
                await self.delay.wait()
        finally:
            self._in_flight -= 1

        self.current = report
        elapsed_ms = int((time.monotonic() - started) * 1000)
        _log(f"[{datetime.now().isoformat()}] {action.value} completed in {elapsed_ms}ms")
        return report