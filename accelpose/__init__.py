"""
AccelPose - Exercise Repetition Core
====================================
Joint-angle geometry and repetition counting for pose-estimation benchmarks.
"""

from .core import BodyPart, ExerciseSession, FrameResult, Keypoint, Person
from .exercises import (
    AngleCalculator,
    ExerciseDetector,
    ExerciseState,
    ExerciseType,
    MotionPhase,
    RepThresholds,
    create_detector,
)

__version__ = "1.0.0"
__all__ = [
    "AngleCalculator",
    "BodyPart",
    "ExerciseDetector",
    "ExerciseSession",
    "ExerciseState",
    "ExerciseType",
    "FrameResult",
    "Keypoint",
    "MotionPhase",
    "Person",
    "RepThresholds",
    "create_detector",
]
