"""
main.py - Keypoint Replay
Replays recorded MoveNet keypoints through the repetition counter
"""

import argparse
import logging
import os
import time
from typing import Dict, List, Optional

import numpy as np

from .core import ExerciseSession, Person
from .core.keypoints import NUM_KEYPOINTS
from .exercises import ExerciseType

# ============================================================================
# 🔧 CONFIGURATION
# ============================================================================

EXERCISE_CHOICES = {
    "squat": ExerciseType.SQUAT,
    "push-up": ExerciseType.PUSH_UP,
}

MIN_DETECTION_SCORE = 0.3

# ============================================================================


def load_keypoint_frames(path: str) -> np.ndarray:
    """
    Load a recorded keypoint stream.

    Args:
        path: .npy file holding one MoveNet output per frame, shaped
            (N, 17, 3) or (N, 1, 1, 17, 3)

    Returns:
        Array of shape (N, 17, 3)
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"Keypoint file not found: {path}")

    frames = np.load(path)
    values_per_frame = NUM_KEYPOINTS * 3
    if frames.ndim < 2 or frames.size % values_per_frame != 0:
        raise ValueError(f"Cannot read {path} as MoveNet poses: shape {frames.shape}")

    return frames.reshape((-1, NUM_KEYPOINTS, 3))


class ReplaySystem:
    """
    Feeds recorded poses frame by frame into an ExerciseSession.
    """

    def __init__(self, exercise_type: ExerciseType, min_detection_score: float = MIN_DETECTION_SCORE):
        self.session = ExerciseSession(exercise_type)
        self.min_detection_score = min_detection_score

    def run(self, frames: np.ndarray) -> Dict:
        """
        Process every frame and print completed reps.

        Returns:
            Summary statistics for the replay
        """
        exercise = self.session.exercise_type.display_name
        print(f"🔹 [Replay] {len(frames)} frames, exercise: {exercise}")

        start_time = time.time()
        frames_with_person = 0
        rep_frames: List[int] = []

        for frame_idx, output in enumerate(frames):
            person: Optional[Person] = Person.from_movenet(output, self.min_detection_score)
            if person is not None:
                frames_with_person += 1

            result = self.session.process(person)
            if result.completed:
                rep_frames.append(frame_idx)
                print(f"💪 Frame {frame_idx:5d}: {exercise} Rep #{result.repetition_count} "
                      f"({result.angle:.1f}°)")

        total_time = time.time() - start_time

        summary = {
            "exercise": exercise,
            "frames": len(frames),
            "frames_with_person": frames_with_person,
            "repetitions": self.session.repetition_count,
            "rep_frames": rep_frames,
            "processing_time": total_time,
        }

        print("\n" + "=" * 70)
        print("📊 REPLAY SUMMARY")
        print("=" * 70)
        print(f"Exercise: {exercise}")
        print(f"Total frames: {summary['frames']}")
        print(f"Frames with person: {frames_with_person}")
        print(f"Repetitions: {summary['repetitions']}")
        print(f"Processing time: {total_time:.3f} seconds")
        print("=" * 70 + "\n")

        return summary


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point with command-line argument parsing."""
    parser = argparse.ArgumentParser(
        description="AccelPose: replay recorded keypoints through the repetition counter"
    )

    parser.add_argument('keypoints', type=str,
                        help='Path to a .npy file of MoveNet outputs, one per frame')
    parser.add_argument('--exercise', choices=sorted(EXERCISE_CHOICES), default='squat',
                        help='Exercise to count')
    parser.add_argument('--min-score', type=float, default=MIN_DETECTION_SCORE,
                        help='Minimum mean keypoint score to accept a pose')
    parser.add_argument('--verbose', action='store_true',
                        help='Log every state transition')

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    try:
        frames = load_keypoint_frames(args.keypoints)
        system = ReplaySystem(EXERCISE_CHOICES[args.exercise], args.min_score)
        system.run(frames)
    except (OSError, ValueError) as e:
        print(f"\n❌ Error: {e}")
        return 1

    return 0


if __name__ == "__main__":
    exit(main())
