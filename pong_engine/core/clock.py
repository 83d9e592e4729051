"""
Fixed timestep accumulator.

Turns variable real frame times into a whole number of fixed
simulation steps, carrying the remainder over to the next frame.

Usage:
    timestep = FixedTimestep(1 / 64)
    for _ in range(timestep.advance(frame_time)):
        world.update(timestep.step)
    world.render(timestep.alpha)
"""

from __future__ import annotations


class FixedTimestep:
    """
    Accumulates frame time and hands out fixed steps.

    Attributes:
        step: Duration of one fixed step in seconds
        max_steps: Most steps run for a single frame
        max_frame_time: Frame times above this are clamped
    """

    def __init__(
        self,
        step: float,
        max_steps: int = 5,
        max_frame_time: float = 0.25,
    ):
        if step <= 0:
            raise ValueError(f"Fixed step must be positive, got {step}")

        self.step = step
        self.max_steps = max_steps
        self.max_frame_time = max_frame_time
        self._accumulator = 0.0

    @property
    def accumulator(self) -> float:
        """Unconsumed time in seconds."""
        return self._accumulator

    @property
    def alpha(self) -> float:
        """Interpolation factor (0-1) between the last two steps."""
        return self._accumulator / self.step

    def advance(self, frame_time: float) -> int:
        """
        Add a frame's worth of time.

        Args:
            frame_time: Real time since the previous frame in seconds

        Returns:
            Number of fixed steps to run this frame
        """
        # Prevent spiral of death
        self._accumulator += min(max(frame_time, 0.0), self.max_frame_time)

        steps = 0
        while self._accumulator >= self.step:
            self._accumulator -= self.step
            steps += 1

            if steps >= self.max_steps:
                self._accumulator = 0.0
                break

        return steps

    def reset(self) -> None:
        """Drop any accumulated time."""
        self._accumulator = 0.0
