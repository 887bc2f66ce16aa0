"""Scripted enemy spawning from comma-separated POP and WAIT commands."""

from __future__ import annotations

import re
from collections import deque
from pathlib import Path
from typing import Callable

from .vector import Vector3

_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


def _leading_float(text: str) -> float:
    """Parse the leading number of ``text`` leniently; 0.0 if there is none."""
    match = _FLOAT_PREFIX.match(text)
    return float(match.group(1)) if match else 0.0


def _leading_int(text: str) -> int:
    """Parse the leading integer of ``text`` leniently; 0 if there is none."""
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


class EnemyPopScript:
    """Runs a spawn script one frame at a time.

    Each line is ``POP,x,y,z`` to spawn an enemy, ``WAIT,frames`` to pause,
    or a ``//`` comment. Other lines are ignored.
    """

    def __init__(self, text: str) -> None:
        self._lines = deque(text.split("\n"))
        self.is_waiting = False
        self.wait_timer = 0

    @classmethod
    def from_file(cls, path: str | Path) -> EnemyPopScript:
        """Read a script from a file."""
        return cls(Path(path).read_text(encoding="utf-8"))

    @property
    def is_exhausted(self) -> bool:
        """Whether no command is left to run."""
        return not self.is_waiting and not self._lines

    def update(self, on_pop: Callable[[Vector3], None]) -> None:
        """Run one frame: count down a wait, or run commands up to the next WAIT."""
        if self.is_waiting:
            self.wait_timer -= 1
            if self.wait_timer <= 0:
                self.is_waiting = False
            return

        while self._lines:
            fields = self._lines.popleft().split(",")
            command = fields[0]
            arguments = fields[1:] + [""] * 3

            if command.startswith("//"):
                continue
            if command.startswith("POP"):
                on_pop(Vector3(*(_leading_float(word) for word in arguments[:3])))
            elif command.startswith("WAIT"):
                self.is_waiting = True
                self.wait_timer = _leading_int(arguments[0])
                break