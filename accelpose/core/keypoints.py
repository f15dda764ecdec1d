"""
keypoints.py - Pose Data Model
==============================
Keypoint and Person containers plus the COCO 17-point index table
shared by MoveNet and BlazePose outputs.
"""

import enum
import logging
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

import numpy as np

logger = logging.getLogger(__name__)

NUM_KEYPOINTS = 17


class BodyPart(enum.IntEnum):
    """Keypoint indices for the COCO 17-point layout."""
    NOSE = 0
    LEFT_EYE = 1
    RIGHT_EYE = 2
    LEFT_EAR = 3
    RIGHT_EAR = 4
    LEFT_SHOULDER = 5
    RIGHT_SHOULDER = 6
    LEFT_ELBOW = 7
    RIGHT_ELBOW = 8
    LEFT_WRIST = 9
    RIGHT_WRIST = 10
    LEFT_HIP = 11
    RIGHT_HIP = 12
    LEFT_KNEE = 13
    RIGHT_KNEE = 14
    LEFT_ANKLE = 15
    RIGHT_ANKLE = 16

    @property
    def label(self) -> str:
        return self.name.lower()


BODY_PART_LABELS: Tuple[str, ...] = tuple(part.label for part in BodyPart)


@dataclass(frozen=True)
class Keypoint:
    """
    A single body landmark.

    Attributes:
        x, y: Normalized image coordinates (0.0-1.0)
        score: Confidence (0.0-1.0)
        label: Body part name, e.g. "left_knee"
    """
    x: float
    y: float
    score: float
    label: str = ""


@dataclass(frozen=True)
class Person:
    """A detected person: 17 keypoints in COCO order and an overall score."""
    keypoints: Tuple[Keypoint, ...]
    score: float

    def keypoint(self, index: int) -> Optional[Keypoint]:
        """Keypoint at `index`, or None if the set does not contain it."""
        if 0 <= index < len(self.keypoints):
            return self.keypoints[index]
        return None

    @classmethod
    def from_keypoints(cls, keypoints: Sequence[Keypoint]) -> "Person":
        """Build a Person whose score is the mean keypoint score."""
        keypoints = tuple(keypoints)
        score = sum(kp.score for kp in keypoints) / len(keypoints) if keypoints else 0.0
        return cls(keypoints=keypoints, score=score)

    @classmethod
    def from_movenet(cls, output: np.ndarray, min_score: float = 0.3) -> Optional["Person"]:
        """
        Parse a single-pose MoveNet output tensor.

        Args:
            output: Array reshapeable to (17, 3) with rows [y, x, score],
                e.g. the raw (1, 1, 17, 3) Lightning output
            min_score: Minimum mean keypoint score for a valid detection

        Returns:
            Person, or None if the mean score is below `min_score`
        """
        output = np.asarray(output, dtype=np.float32)
        if output.size != NUM_KEYPOINTS * 3:
            raise ValueError(
                f"Expected {NUM_KEYPOINTS * 3} values for a MoveNet pose, got shape {output.shape}"
            )
        keypoints_raw = output.reshape((NUM_KEYPOINTS, 3))

        keypoints = tuple(
            Keypoint(
                x=float(keypoints_raw[i, 1]),
                y=float(keypoints_raw[i, 0]),
                score=float(keypoints_raw[i, 2]),
                label=BODY_PART_LABELS[i],
            )
            for i in range(NUM_KEYPOINTS)
        )
        avg_score = float(np.mean(keypoints_raw[:, 2]))

        if avg_score < min_score:
            logger.debug("Pose rejected: mean keypoint score %.2f < %.2f", avg_score, min_score)
            return None

        return cls(keypoints=keypoints, score=avg_score)
