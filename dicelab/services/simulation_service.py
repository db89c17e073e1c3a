import logging
import threading
from typing import Dict, List, Optional, Sequence

import numpy as np

from dicelab.analysis import N_FACES, InvalidInput, as_face_vector, check_face
from dicelab.analysis.bayes import (
    compute_bayes_estimator,
    compute_map_estimator,
    compute_posterior,
    credible_intervals,
)
from dicelab.analysis.frequencies import compute_probabilities
from dicelab.analysis.sampler import MODES, create_sampler
from dicelab.config import Settings, settings
from dicelab.schemas.estimate import DiceEstimate

logger = logging.getLogger(__name__)


class DiceSession:
    """
    Roll history and counts of one die, plus the prior used to estimate it.

    Rolls may be recorded from several threads; history and counts are
    updated together under a lock. Without an explicit seed, a configured
    random_seed is combined with the mode so each die gets its own stream.
    """

    def __init__(
        self,
        mode: str,
        prior: Optional[Sequence[float]] = None,
        weights: Optional[Sequence[float]] = None,
        seed: Optional[int] = None,
        config: Optional[Settings] = None,
    ):
        self.config = config or settings
        self.mode = mode
        if seed is None and self.config.random_seed is not None and mode in MODES:
            entropy = [self.config.random_seed, MODES.index(mode)]
            seed = int(np.random.SeedSequence(entropy).generate_state(1)[0])
        self.sampler = create_sampler(mode, weights=weights, seed=seed, config=self.config)
        self.prior = as_face_vector(prior if prior is not None else self.config.default_prior, "prior")
        self.throws: List[int] = []
        self.counts: List[int] = [0] * N_FACES
        self._lock = threading.Lock()

    def roll(self, n: int = 1) -> List[int]:
        faces = self.sampler.roll(n)
        self._record(faces)
        logger.debug("%s die: rolled %d, total %d", self.mode, n, len(self.throws))
        return faces

    def record(self, faces: Sequence[int]) -> None:
        """Record faces rolled outside this session."""
        self._record([check_face(face) for face in faces])

    def _record(self, faces: List[int]) -> None:
        with self._lock:
            self.throws.extend(faces)
            for face in faces:
                self.counts[face - 1] += 1

    def reset(self) -> None:
        with self._lock:
            self.throws = []
            self.counts = [0] * N_FACES
        logger.info("%s die: history cleared", self.mode)

    def set_prior(self, prior: Sequence[float]) -> None:
        self.prior = as_face_vector(prior, "prior")
        logger.info("%s die: prior set to %s", self.mode, self.prior)

    def estimate(self, with_intervals: bool = False) -> DiceEstimate:
        with self._lock:
            counts = list(self.counts)
        prior = list(self.prior)

        posterior = compute_posterior(prior, counts)
        intervals = None
        if with_intervals and all(a > 0 for a in posterior):
            intervals = credible_intervals(posterior, self.config.credible_level)

        return DiceEstimate(
            mode=self.mode,
            n_rolls=sum(counts),
            counts=counts,
            probabilities=compute_probabilities(counts),
            prior=prior,
            posterior=posterior,
            bayes_estimator=compute_bayes_estimator(posterior),
            map_estimator=compute_map_estimator(prior, counts),
            credible_intervals=intervals,
            code_version=self.config.code_version,
        )


class SimulationService:
    """One biased and one unbiased die, each with its own generator and prior."""

    def __init__(self, config: Optional[Settings] = None, seed: Optional[int] = None):
        self.config = config or settings
        if seed is None:
            seed = self.config.random_seed

        # Independent streams per die, reproducible from a single seed
        child_seeds = np.random.SeedSequence(seed).spawn(len(MODES))
        self.sessions: Dict[str, DiceSession] = {
            mode: DiceSession(
                mode,
                seed=int(child.generate_state(1)[0]),
                config=self.config,
            )
            for mode, child in zip(MODES, child_seeds)
        }

    def session(self, mode: str) -> DiceSession:
        if mode not in self.sessions:
            raise InvalidInput(f"Unknown mode: {mode!r} (expected one of {', '.join(MODES)})")
        return self.sessions[mode]

    def roll(self, mode: str, n: int = 1) -> List[int]:
        return self.session(mode).roll(n)

    def estimate(self, mode: str, with_intervals: bool = False) -> DiceEstimate:
        return self.session(mode).estimate(with_intervals)

    def estimate_all(self, with_intervals: bool = False) -> Dict[str, DiceEstimate]:
        return {mode: s.estimate(with_intervals) for mode, s in self.sessions.items()}

    def reset(self, mode: Optional[str] = None) -> None:
        modes = [mode] if mode is not None else list(self.sessions)
        for m in modes:
            self.session(m).reset()
