"""Full-screen fade in and fade out, advanced one frame at a time."""

from __future__ import annotations

from enum import Enum, auto

from .vector import Vector4

FRAME_TIME = 1.0 / 60.0
"""Seconds that one call to :meth:`Fade.update` advances."""


class FadeStatus(Enum):
    NONE = auto()
    FADE_IN = auto()
    FADE_OUT = auto()


def _clamp01(value: float) -> float:
    return max(0.0, min(value, 1.0))


class Fade:
    """A black overlay whose opacity changes over a set duration."""

    def __init__(self) -> None:
        self.status = FadeStatus.NONE
        self.duration = 0.0
        self.counter = 0.0
        self.color = Vector4(0.0, 0.0, 0.0, 1.0)

    @property
    def alpha(self) -> float:
        """Current opacity of the overlay."""
        return self.color.w

    @property
    def is_visible(self) -> bool:
        """Whether the overlay is drawn."""
        return self.status is not FadeStatus.NONE

    def _progress(self) -> float:
        if self.duration == 0.0:
            return 1.0
        return self.counter / self.duration

    def update(self) -> None:
        """Advance the fade by one frame."""
        if self.status is FadeStatus.NONE:
            return
        self.counter = min(self.counter + FRAME_TIME, self.duration)
        if self.status is FadeStatus.FADE_IN:
            alpha = _clamp01(1.0 - self._progress())
        else:
            alpha = _clamp01(self._progress())
        self.color = Vector4(0.0, 0.0, 0.0, alpha)

    def start(self, status: FadeStatus, duration: float) -> None:
        """Begin a fade of the given kind lasting ``duration`` seconds."""
        self.status = FadeStatus(status)
        self.duration = duration
        self.counter = 0.0

    def stop(self) -> None:
        """End any fade; the overlay is no longer drawn."""
        self.status = FadeStatus.NONE

    def is_finished(self) -> bool:
        """Whether the current fade has run its full duration."""
        if self.status in (FadeStatus.FADE_IN, FadeStatus.FADE_OUT):
            return self.counter >= self.duration
        return True