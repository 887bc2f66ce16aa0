"""Simple time-based interpolation of scale, rotation or translation."""

from __future__ import annotations

from .interpolation import lerp
from .vector import Vector3


class SRTAnimator:
    """Moves a vector from a start value to an end value over a duration in seconds."""

    def __init__(
        self,
        start_vector: Vector3 = Vector3(),
        end_vector: Vector3 = Vector3(),
        duration: float = 1.0,
    ) -> None:
        self.elapsed_time = 0.0
        self.set_animation(start_vector, end_vector, duration)

    def set_animation(
        self, start_vector: Vector3, end_vector: Vector3, duration: float
    ) -> None:
        """Set the animation's endpoints and duration; elapsed time is kept."""
        if duration <= 0.0:
            raise ValueError("duration must be positive")
        self.start_vector = start_vector
        self.end_vector = end_vector
        self.duration = duration

    def _step(self, elapsed_time: float, delta_time: float) -> float:
        if elapsed_time < self.duration:
            elapsed_time = min(elapsed_time + delta_time, self.duration)
        return elapsed_time

    def _value_at(self, elapsed_time: float) -> Vector3:
        return lerp(self.start_vector, self.end_vector, elapsed_time / self.duration)

    def update(self, delta_time: float) -> Vector3:
        """Advance the internal clock by ``delta_time`` and return the current value."""
        self.elapsed_time = self._step(self.elapsed_time, delta_time)
        return self._value_at(self.elapsed_time)

    def advance(self, elapsed_time: float, delta_time: float) -> tuple[Vector3, float]:
        """Advance an externally kept clock; return the value and the new elapsed time."""
        elapsed_time = self._step(elapsed_time, delta_time)
        return self._value_at(elapsed_time), elapsed_time