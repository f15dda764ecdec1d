"""
Exercise Logic Module
=====================
Angle geometry and the repetition state machine, with one profile per exercise.
"""

from .base import AngleCalculator, ExerciseState, ExerciseType, MotionPhase
from .detector import ExerciseDetector, ExerciseProfile, RepThresholds, transition
from .squat import SQUAT_PROFILE, create_squat_detector
from .push_up import PUSH_UP_PROFILE, create_push_up_detector
from .registry import PROFILES, create_detector

__all__ = [
    'AngleCalculator',
    'ExerciseState',
    'ExerciseType',
    'MotionPhase',
    'ExerciseDetector',
    'ExerciseProfile',
    'RepThresholds',
    'transition',
    'SQUAT_PROFILE',
    'PUSH_UP_PROFILE',
    'PROFILES',
    'create_squat_detector',
    'create_push_up_detector',
    'create_detector',
]
