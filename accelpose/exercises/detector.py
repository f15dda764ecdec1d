"""
detector.py - Repetition State Machine
======================================
One four-phase state machine shared by every exercise. An exercise is
described by an ExerciseProfile: which joint angle to watch and the
thresholds that move the machine between phases.

    EXTENDED -> FLEXING -> FLEXED -> EXTENDING -> EXTENDED (+1 rep)

The hysteresis margin keeps a jittery angle hovering near a threshold
from bouncing the machine back and forth.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from ..core.keypoints import Person
from .base import AngleCalculator, ExerciseState, MotionPhase

logger = logging.getLogger(__name__)

AngleSource = Callable[[AngleCalculator, Person], Optional[float]]


@dataclass(frozen=True)
class RepThresholds:
    """
    Angle thresholds in degrees.

    Attributes:
        extended: Joint counts as straight at or above this angle
        flexed: Joint counts as bent at or below this angle
        hysteresis: Dead-band added around the thresholds
    """
    extended: float
    flexed: float
    hysteresis: float = 10.0

    def __post_init__(self):
        if self.flexed >= self.extended:
            raise ValueError(
                f"flexed threshold ({self.flexed}) must be below extended threshold ({self.extended})"
            )
        if self.hysteresis < 0:
            raise ValueError(f"hysteresis must be non-negative, got {self.hysteresis}")


@dataclass(frozen=True)
class ExerciseProfile:
    """Everything that distinguishes one exercise from another."""
    name: str
    angle_source: AngleSource
    thresholds: RepThresholds


def transition(phase: MotionPhase, angle: float,
               thresholds: RepThresholds) -> Tuple[MotionPhase, ExerciseState]:
    """
    Advance the state machine by one frame.

    Returns:
        (next_phase, signal). A signal of COMPLETED means a repetition
        finished on this frame.
    """
    up = thresholds.extended
    down = thresholds.flexed
    margin = thresholds.hysteresis

    if phase is MotionPhase.EXTENDED:
        if angle < down + margin:
            return MotionPhase.FLEXING, ExerciseState.STARTING
        return MotionPhase.EXTENDED, ExerciseState.IDLE

    if phase is MotionPhase.FLEXING:
        if angle <= down:
            return MotionPhase.FLEXED, ExerciseState.IN_MOTION
        if angle > up - margin:
            # Came back up before reaching the bottom
            return MotionPhase.EXTENDED, ExerciseState.IDLE
        return MotionPhase.FLEXING, ExerciseState.IN_MOTION

    if phase is MotionPhase.FLEXED:
        if angle > down + margin:
            return MotionPhase.EXTENDING, ExerciseState.IN_MOTION
        return MotionPhase.FLEXED, ExerciseState.IN_MOTION

    # EXTENDING
    if angle >= up:
        return MotionPhase.EXTENDED, ExerciseState.COMPLETED
    if angle < down:
        # Went back down before fully extending
        return MotionPhase.FLEXED, ExerciseState.IN_MOTION
    return MotionPhase.EXTENDING, ExerciseState.IN_MOTION


class ExerciseDetector:
    """
    Counts repetitions of one exercise from a stream of poses.

    Not thread-safe: feed frames from one caller, in temporal order.
    """

    INITIAL_PHASE = MotionPhase.EXTENDED

    def __init__(self, profile: ExerciseProfile,
                 angle_calculator: Optional[AngleCalculator] = None):
        self.profile = profile
        self.angle_calculator = angle_calculator or AngleCalculator()
        self.phase = self.INITIAL_PHASE
        self.repetition_count = 0
        self.last_angle: Optional[float] = None

    @property
    def name(self) -> str:
        return self.profile.name

    def analyze_frame(self, person: Optional[Person]) -> ExerciseState:
        """
        Analyze one frame.

        Args:
            person: Detected pose, or None if nobody was detected

        Returns:
            Motion signal for this frame. Frames without a usable angle
            return IDLE and leave the state untouched.
        """
        if person is None:
            return ExerciseState.IDLE

        angle = self.profile.angle_source(self.angle_calculator, person)
        if angle is None:
            return ExerciseState.IDLE

        self.last_angle = angle
        previous = self.phase
        self.phase, signal = transition(self.phase, angle, self.profile.thresholds)

        if signal is ExerciseState.COMPLETED:
            self.repetition_count += 1
            logger.info("%s rep #%d (angle %.1f)", self.name, self.repetition_count, angle)
        elif self.phase is not previous:
            logger.debug("%s: %s -> %s at %.1f", self.name, previous.name, self.phase.name, angle)

        return signal

    def get_repetition_count(self) -> int:
        return self.repetition_count

    def get_current_angle(self) -> Optional[float]:
        """Last monitored joint angle, or None if none has been measured since reset."""
        return self.last_angle

    def reset(self):
        """Reset counter and state."""
        self.repetition_count = 0
        self.phase = self.INITIAL_PHASE
        self.last_angle = None
