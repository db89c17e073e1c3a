from typing import List, Sequence

import pandas as pd

from dicelab.analysis import N_FACES, as_face_vector, check_face


def compute_probabilities(counts: Sequence[float]) -> List[float]:
    """
    Empirical face probabilities from a count vector.

    Returns six zeros when no roll has been observed.
    """
    vector = as_face_vector(counts, "counts")
    total = sum(vector)
    if total == 0:
        return [0.0] * N_FACES
    return [c / total for c in vector]


def count_rolls(rolls: Sequence[int]) -> List[int]:
    """Count vector (index 0 is face 1) of a roll history."""
    faces = [check_face(face) for face in rolls]
    if not faces:
        return [0] * N_FACES

    counts = pd.Series(faces).value_counts()
    return [int(counts.get(face, 0)) for face in range(1, N_FACES + 1)]
