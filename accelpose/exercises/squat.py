"""
squat.py - Squat Detection Profile
==================================
Counts squats from the average knee angle (hip-knee-ankle).

    STANDING (knee > 160) -> SQUATTING (knee <= 100) -> STANDING = 1 rep
"""

from typing import Optional

from .base import AngleCalculator
from .detector import ExerciseDetector, ExerciseProfile, RepThresholds

# ===== CONFIGURATION =====
ANGLE_THRESHOLD_UP = 160.0    # Standing, knees straight
ANGLE_THRESHOLD_DOWN = 100.0  # Bottom of the squat
HYSTERESIS = 10.0

SQUAT_THRESHOLDS = RepThresholds(
    extended=ANGLE_THRESHOLD_UP,
    flexed=ANGLE_THRESHOLD_DOWN,
    hysteresis=HYSTERESIS,
)

SQUAT_PROFILE = ExerciseProfile(
    name="Squat",
    angle_source=AngleCalculator.average_knee_angle,
    thresholds=SQUAT_THRESHOLDS,
)


def create_squat_detector(thresholds: Optional[RepThresholds] = None,
                          angle_calculator: Optional[AngleCalculator] = None) -> ExerciseDetector:
    """Squat detector, optionally with custom thresholds."""
    profile = SQUAT_PROFILE
    if thresholds is not None:
        profile = ExerciseProfile(profile.name, profile.angle_source, thresholds)
    return ExerciseDetector(profile, angle_calculator)
