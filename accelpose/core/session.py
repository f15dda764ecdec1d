"""
session.py - Exercise Session
=============================
Owns the single active exercise detector and keeps exercise switching,
resets and frame analysis from interleaving when frames arrive from a
camera worker thread.
"""

import logging
import threading
from dataclasses import dataclass
from typing import Optional

from ..exercises.base import AngleCalculator, ExerciseState, ExerciseType
from ..exercises.detector import ExerciseDetector
from ..exercises.registry import create_detector
from .keypoints import Person

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FrameResult:
    """Outcome of one processed frame."""
    exercise_type: ExerciseType
    state: ExerciseState
    repetition_count: int
    angle: Optional[float]

    @property
    def completed(self) -> bool:
        return self.state is ExerciseState.COMPLETED


class ExerciseSession:
    """
    Exercise selection plus repetition counting for one camera stream.
    """

    def __init__(self, exercise_type: ExerciseType = ExerciseType.NONE,
                 angle_calculator: Optional[AngleCalculator] = None):
        self._lock = threading.Lock()
        self._angle_calculator = angle_calculator or AngleCalculator()
        self._exercise_type = exercise_type
        self._detector: Optional[ExerciseDetector] = create_detector(exercise_type, self._angle_calculator)

    @property
    def exercise_type(self) -> ExerciseType:
        return self._exercise_type

    @property
    def repetition_count(self) -> int:
        with self._lock:
            return self._detector.get_repetition_count() if self._detector else 0

    @property
    def current_angle(self) -> Optional[float]:
        with self._lock:
            return self._detector.get_current_angle() if self._detector else None

    def select_exercise(self, exercise_type: ExerciseType):
        """Switch exercise. The previous detector and its count are discarded."""
        with self._lock:
            if exercise_type == self._exercise_type:
                return
            logger.info("Exercise changed: %s -> %s",
                        self._exercise_type.display_name, exercise_type.display_name)
            self._exercise_type = exercise_type
            self._detector = create_detector(exercise_type, self._angle_calculator)

    def reset_exercise(self):
        """Zero the counter of the active exercise."""
        with self._lock:
            if self._detector is not None:
                self._detector.reset()
                logger.info("%s counter reset", self._exercise_type.display_name)

    def process(self, person: Optional[Person]) -> FrameResult:
        """
        Feed one frame's pose to the active detector.

        Args:
            person: Detected pose, or None when no person is in frame
        """
        with self._lock:
            if self._detector is None:
                return FrameResult(self._exercise_type, ExerciseState.IDLE, 0, None)

            state = self._detector.analyze_frame(person)
            return FrameResult(
                exercise_type=self._exercise_type,
                state=state,
                repetition_count=self._detector.get_repetition_count(),
                angle=self._detector.get_current_angle(),
            )
