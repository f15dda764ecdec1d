"""
registry.py - Exercise Lookup
=============================
Maps an ExerciseType to its detection profile.
"""

from types import MappingProxyType
from typing import Optional

from .base import AngleCalculator, ExerciseType
from .detector import ExerciseDetector
from .push_up import PUSH_UP_PROFILE
from .squat import SQUAT_PROFILE

PROFILES = MappingProxyType({
    ExerciseType.SQUAT: SQUAT_PROFILE,
    ExerciseType.PUSH_UP: PUSH_UP_PROFILE,
})


def create_detector(exercise_type: ExerciseType,
                    angle_calculator: Optional[AngleCalculator] = None) -> Optional[ExerciseDetector]:
    """
    Build a fresh detector for `exercise_type`.

    Returns:
        ExerciseDetector, or None for ExerciseType.NONE
    """
    profile = PROFILES.get(exercise_type)
    if profile is None:
        return None
    return ExerciseDetector(profile, angle_calculator)
