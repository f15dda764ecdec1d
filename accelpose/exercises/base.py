"""
base.py - Base types and angle utilities for exercise detection
================================================================
Contains the exercise enums and the joint-angle geometry shared by
all exercise types.
"""

import enum
import logging
from typing import Optional, Tuple, Union

import numpy as np

from ..core.keypoints import BodyPart, Keypoint, Person

logger = logging.getLogger(__name__)

Point = Union[Keypoint, Tuple[float, float]]


class ExerciseType(enum.Enum):
    """Exercises supported for repetition counting."""
    NONE = "No Exercise"
    SQUAT = "Squat"
    PUSH_UP = "Push-up"

    @property
    def display_name(self) -> str:
        return self.value

    @classmethod
    def from_display_name(cls, name: str) -> "ExerciseType":
        for exercise in cls:
            if exercise.value == name:
                return exercise
        return cls.NONE


class ExerciseState(enum.Enum):
    """Per-frame motion signal reported to the caller."""
    IDLE = "idle"              # No movement detected
    STARTING = "starting"      # Movement began (going down)
    IN_MOTION = "in_motion"    # Mid-repetition
    COMPLETED = "completed"    # One repetition finished this frame


class MotionPhase(enum.Enum):
    """Internal phase of the repetition state machine."""
    EXTENDED = "extended"      # Standing / arms straight
    FLEXING = "flexing"        # Going down
    FLEXED = "flexed"          # Bottom position
    EXTENDING = "extending"    # Coming back up


def _xy(point: Point) -> Tuple[float, float]:
    if isinstance(point, Keypoint):
        return point.x, point.y
    return point[0], point[1]


class AngleCalculator:
    """Utility class for calculating joint angles from keypoints."""

    # ===== CONFIGURATION =====
    MIN_KEYPOINT_SCORE = 0.3

    def __init__(self, min_keypoint_score: float = MIN_KEYPOINT_SCORE):
        self.min_keypoint_score = min_keypoint_score

    @staticmethod
    def calculate_angle(first: Point, middle: Point, last: Point) -> float:
        """
        Calculate the angle first-middle-last (at `middle`) in degrees.

        Args:
            first, middle, last: Keypoints or (x, y) normalized coordinates

        Returns:
            Angle in degrees (0-180). 0.0 when either arm of the angle
            has zero length.
        """
        a, b, c = np.array(_xy(first)), np.array(_xy(middle)), np.array(_xy(last))
        vector_a = a - b
        vector_b = c - b

        magnitude_a = np.linalg.norm(vector_a)
        magnitude_b = np.linalg.norm(vector_b)
        if magnitude_a == 0.0 or magnitude_b == 0.0:
            return 0.0

        with np.errstate(invalid="ignore"):
            cos_angle = np.clip(np.dot(vector_a, vector_b) / (magnitude_a * magnitude_b), -1.0, 1.0)
            return float(np.degrees(np.arccos(cos_angle)))

    def joint_angle(self, person: Person,
                    first: BodyPart, middle: BodyPart, last: BodyPart) -> Optional[float]:
        """
        Angle at `middle` for three body parts of `person`.

        Returns None if any keypoint is missing or below the confidence gate.
        """
        points = [person.keypoint(part) for part in (first, middle, last)]
        if any(kp is None for kp in points):
            return None
        if any(kp.score < self.min_keypoint_score for kp in points):
            return None
        return self.calculate_angle(*points)

    def left_knee_angle(self, person: Person) -> Optional[float]:
        return self.joint_angle(person, BodyPart.LEFT_HIP, BodyPart.LEFT_KNEE, BodyPart.LEFT_ANKLE)

    def right_knee_angle(self, person: Person) -> Optional[float]:
        return self.joint_angle(person, BodyPart.RIGHT_HIP, BodyPart.RIGHT_KNEE, BodyPart.RIGHT_ANKLE)

    def left_elbow_angle(self, person: Person) -> Optional[float]:
        return self.joint_angle(person, BodyPart.LEFT_SHOULDER, BodyPart.LEFT_ELBOW, BodyPart.LEFT_WRIST)

    def right_elbow_angle(self, person: Person) -> Optional[float]:
        return self.joint_angle(person, BodyPart.RIGHT_SHOULDER, BodyPart.RIGHT_ELBOW, BodyPart.RIGHT_WRIST)

    @staticmethod
    def bilateral_average(joint: str, left: Optional[float], right: Optional[float]) -> Optional[float]:
        """
        Combine left and right measurements of a joint.

        Both sides present -> mean; one side -> that side; none -> None.
        """
        if left is not None and right is not None:
            logger.debug("Using average %s angle: L=%.1f R=%.1f", joint, left, right)
            return (left + right) / 2
        if left is not None:
            logger.debug("Using only LEFT %s angle: %.1f", joint, left)
            return left
        if right is not None:
            logger.debug("Using only RIGHT %s angle: %.1f", joint, right)
            return right
        logger.debug("No %s angle available (keypoints missing or below confidence)", joint)
        return None

    def average_knee_angle(self, person: Person) -> Optional[float]:
        return self.bilateral_average("knee", self.left_knee_angle(person), self.right_knee_angle(person))

    def average_elbow_angle(self, person: Person) -> Optional[float]:
        return self.bilateral_average("elbow", self.left_elbow_angle(person), self.right_elbow_angle(person))
