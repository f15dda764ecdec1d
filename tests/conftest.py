import math
from typing import Dict, Optional

import numpy as np
import pytest

from accelpose.core.keypoints import BODY_PART_LABELS, BodyPart, Keypoint, Person

LIMB_LENGTH = 0.2

# (proximal, vertex, distal, vertex position)
JOINTS = {
    "left_knee": (BodyPart.LEFT_HIP, BodyPart.LEFT_KNEE, BodyPart.LEFT_ANKLE, (0.4, 0.6)),
    "right_knee": (BodyPart.RIGHT_HIP, BodyPart.RIGHT_KNEE, BodyPart.RIGHT_ANKLE, (0.6, 0.6)),
    "left_elbow": (BodyPart.LEFT_SHOULDER, BodyPart.LEFT_ELBOW, BodyPart.LEFT_WRIST, (0.3, 0.3)),
    "right_elbow": (BodyPart.RIGHT_SHOULDER, BodyPart.RIGHT_ELBOW, BodyPart.RIGHT_WRIST, (0.7, 0.3)),
}


def build_person(left_knee: float = 180.0, right_knee: float = 180.0,
                 left_elbow: float = 180.0, right_elbow: float = 180.0,
                 scores: Optional[Dict[BodyPart, float]] = None,
                 default_score: float = 0.9) -> Person:
    """
    Person whose joints bend by the requested angles (degrees).

    The proximal point sits straight above the vertex and the distal
    point is rotated by the joint angle, so 180 means a straight limb.
    """
    scores = scores or {}
    angles = {"left_knee": left_knee, "right_knee": right_knee,
              "left_elbow": left_elbow, "right_elbow": right_elbow}
    positions = {part: (0.5, 0.1) for part in BodyPart}

    for joint, (first, middle, last, (vx, vy)) in JOINTS.items():
        theta = math.radians(angles[joint])
        positions[middle] = (vx, vy)
        positions[first] = (vx, vy - LIMB_LENGTH)
        positions[last] = (vx + LIMB_LENGTH * math.sin(theta), vy - LIMB_LENGTH * math.cos(theta))

    keypoints = [
        Keypoint(x=positions[part][0], y=positions[part][1],
                 score=scores.get(part, default_score), label=BODY_PART_LABELS[part])
        for part in BodyPart
    ]
    return Person.from_keypoints(keypoints)


def to_movenet(person: Person) -> np.ndarray:
    """MoveNet-style (17, 3) [y, x, score] array for a person."""
    return np.array([[kp.y, kp.x, kp.score] for kp in person.keypoints], dtype=np.float32)


@pytest.fixture
def make_person():
    return build_person


@pytest.fixture
def movenet_array():
    return to_movenet
