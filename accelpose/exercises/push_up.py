"""
push_up.py - Push-up Detection Profile
======================================
Counts push-ups from the average elbow angle (shoulder-elbow-wrist).

    UP (elbow > 155) -> DOWN (elbow <= 100) -> UP = 1 rep
"""

from typing import Optional

from .base import AngleCalculator
from .detector import ExerciseDetector, ExerciseProfile, RepThresholds

# ===== CONFIGURATION =====
ANGLE_THRESHOLD_UP = 155.0    # Arms straight
ANGLE_THRESHOLD_DOWN = 100.0  # Chest down, elbows bent
HYSTERESIS = 10.0

PUSH_UP_THRESHOLDS = RepThresholds(
    extended=ANGLE_THRESHOLD_UP,
    flexed=ANGLE_THRESHOLD_DOWN,
    hysteresis=HYSTERESIS,
)

PUSH_UP_PROFILE = ExerciseProfile(
    name="Push-up",
    angle_source=AngleCalculator.average_elbow_angle,
    thresholds=PUSH_UP_THRESHOLDS,
)


def create_push_up_detector(thresholds: Optional[RepThresholds] = None,
                            angle_calculator: Optional[AngleCalculator] = None) -> ExerciseDetector:
    """Push-up detector, optionally with custom thresholds."""
    profile = PUSH_UP_PROFILE
    if thresholds is not None:
        profile = ExerciseProfile(profile.name, profile.angle_source, thresholds)
    return ExerciseDetector(profile, angle_calculator)
