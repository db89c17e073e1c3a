"""
Die samplers.

A sampler is a zero-argument callable returning one face in 1..6 per call.
The weighted sampler maps a uniform draw to a face by inverse-CDF lookup over
a cumulative distribution built once at construction.
"""

from typing import List, Optional, Sequence

import numpy as np

from dicelab.analysis import N_FACES, InvalidInput, as_face_vector
from dicelab.config import Settings, settings

BIASED_WEIGHTS = (0.14, 0.14, 0.14, 0.14, 0.14, 0.30)
MODES = ("biased", "unbiased")


def normalize_weights(weights: Sequence[float]) -> np.ndarray:
    """Validate face weights, rescaling them to sum to 1 when they do not already."""
    w = np.array(as_face_vector(weights, "weights"))
    total = w.sum()
    if total <= 0:
        raise InvalidInput("weights must have a positive sum")
    if abs(total - 1.0) > 1e-9:
        w = w / total
    return w


def build_cumulative(weights: Sequence[float]) -> np.ndarray:
    """
    Build the cumulative distribution of a face weight vector.

    Weights that do not already sum to 1 are normalized first.

    Args:
        weights: Non-negative weight per face

    Returns:
        Read-only array C with C[i] = sum(weights[0..i])
    """
    cumulative = np.cumsum(normalize_weights(weights))
    cumulative.setflags(write=False)
    return cumulative


def select_face(cumulative: Sequence[float], r: float) -> int:
    """Return the first face i + 1 with r <= C[i]; the last face if r overruns C."""
    for i, c in enumerate(cumulative):
        if r <= c:
            return i + 1
    return len(cumulative)


class UniformSampler:
    """Fair die: each face has probability 1/6."""

    def __init__(self, rng: Optional[np.random.Generator] = None, seed: Optional[int] = None):
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.weights = [1.0 / N_FACES] * N_FACES

    def __call__(self) -> int:
        return int(self.rng.integers(1, N_FACES + 1))

    def roll(self, n: int) -> List[int]:
        if n < 0:
            raise InvalidInput(f"number of rolls must be >= 0, got {n}")
        return [self() for _ in range(n)]


class WeightedSampler:
    """
    Die with an arbitrary face distribution.

    The cumulative distribution is computed once and never modified, so a
    sampler can be called repeatedly; its only mutable state is its own
    random generator.
    """

    def __init__(
        self,
        weights: Sequence[float],
        rng: Optional[np.random.Generator] = None,
        seed: Optional[int] = None,
    ):
        self.weights = normalize_weights(weights).tolist()
        self.cumulative = build_cumulative(self.weights)
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    def __call__(self) -> int:
        return select_face(self.cumulative, self.rng.random())

    def roll(self, n: int) -> List[int]:
        if n < 0:
            raise InvalidInput(f"number of rolls must be >= 0, got {n}")
        return [self() for _ in range(n)]


def create_sampler(
    mode: str,
    weights: Optional[Sequence[float]] = None,
    rng: Optional[np.random.Generator] = None,
    seed: Optional[int] = None,
    config: Optional[Settings] = None,
):
    """
    Return a sampler for the given die mode.

    Args:
        mode: "unbiased" (uniform faces) or "biased" (weighted faces)
        weights: Face weights for the biased die; defaults to the configured
            biased weights
        rng: Generator owned by the sampler
        seed: Seed for a fresh generator when rng is not given
        config: Settings overriding the module-level defaults

    Returns:
        Zero-argument callable producing one face in 1..6 per call
    """
    config = config or settings
    if seed is None and rng is None:
        seed = config.random_seed

    if mode == "unbiased":
        return UniformSampler(rng=rng, seed=seed)
    if mode == "biased":
        if weights is None:
            weights = config.biased_weights
        return WeightedSampler(weights, rng=rng, seed=seed)
    raise InvalidInput(f"Unknown mode: {mode!r} (expected one of {', '.join(MODES)})")
