"""
Core Module
===========
Pose data model and the exercise session that drives the detectors.
"""

from .keypoints import BODY_PART_LABELS, BodyPart, Keypoint, Person
from .session import ExerciseSession, FrameResult

__all__ = [
    'BODY_PART_LABELS',
    'BodyPart',
    'Keypoint',
    'Person',
    'ExerciseSession',
    'FrameResult',
]
