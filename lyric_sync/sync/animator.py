from __future__ import annotations


DEFAULT_LINE_SPACING = 80.0
DEFAULT_DAMPING = 0.1
DEFAULT_EPSILON = 0.5


class ScrollAnimator:
    """
    Eases a scroll offset toward the row of the active line.

    Every tick moves the current offset a fixed fraction (``damping``) of the
    remaining distance to the target. Once the distance is within
    ``epsilon`` the animator is settled and ticks do nothing until the
    target changes.
    """

    def __init__(
        self,
        *,
        line_spacing: float = DEFAULT_LINE_SPACING,
        damping: float = DEFAULT_DAMPING,
        epsilon: float = DEFAULT_EPSILON,
    ):
        if line_spacing <= 0:
            raise ValueError(f"line_spacing must be > 0, got {line_spacing}")
        if not 0 < damping < 1:
            raise ValueError(f"damping must be in (0, 1), got {damping}")
        if epsilon <= 0:
            raise ValueError(f"epsilon must be > 0, got {epsilon}")
        self.line_spacing = float(line_spacing)
        self.damping = float(damping)
        self.epsilon = float(epsilon)
        self.current_offset = 0.0
        self.target_offset = 0.0

    @property
    def settled(self) -> bool:
        return abs(self.current_offset - self.target_offset) <= self.epsilon

    def retarget(self, active_index: int) -> None:
        # no active line scrolls back to the top
        self.target_offset = max(active_index, 0) * self.line_spacing

    def tick(self) -> bool:
        """Advance one step; returns False when already settled."""
        if self.settled:
            return False
        self.current_offset += (self.target_offset - self.current_offset) * self.damping
        return True

    def reset(self) -> None:
        self.current_offset = 0.0
        self.target_offset = 0.0
