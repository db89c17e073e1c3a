import math
from collections.abc import Mapping
from typing import List, Sequence

N_FACES = 6


class InvalidInput(ValueError):
    """Raised when a vector, mode or face does not describe a six-sided die."""


def as_face_vector(values: Sequence[float], name: str = "vector") -> List[float]:
    """
    Validate a per-face vector and return it as a list of floats.

    Args:
        values: Sequence indexed by face (index 0 is face 1)
        name: Label used in error messages

    Returns:
        List of N_FACES floats

    Raises:
        InvalidInput: wrong length, non-numeric, non-finite or negative entries
    """
    if isinstance(values, (str, bytes, Mapping)):
        raise InvalidInput(f"{name} must be a sequence of numbers, got {type(values).__name__}")
    try:
        vector = [float(v) for v in values]
    except (TypeError, ValueError) as exc:
        raise InvalidInput(f"{name} must be a sequence of numbers") from exc

    if len(vector) != N_FACES:
        raise InvalidInput(f"{name} must have {N_FACES} entries, got {len(vector)}")
    for i, v in enumerate(vector):
        if not math.isfinite(v):
            raise InvalidInput(f"{name}[{i}] is not finite")
        if v < 0:
            raise InvalidInput(f"{name}[{i}] is negative ({v})")
    return vector


def check_face(face: int) -> int:
    """Return face as int, or raise InvalidInput if it is not in 1..N_FACES."""
    try:
        valid = not isinstance(face, bool) and int(face) == face and 1 <= face <= N_FACES
    except (TypeError, ValueError, OverflowError):
        valid = False
    if not valid:
        raise InvalidInput(f"face must be an integer in 1..{N_FACES}, got {face!r}")
    return int(face)
