"""
Dirichlet-multinomial updating over the six face probabilities.

Formula: alpha_i = prior_i + count_i
         mean_i  = alpha_i / sum(alpha)
         mode_i  = max(0, alpha_i - 1) / max(1, sum(alpha) - K)
"""

from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np
from scipy import stats

from dicelab.analysis import N_FACES, InvalidInput, as_face_vector


def compute_posterior(prior: Sequence[float], observations: Sequence[float]) -> List[float]:
    """Posterior concentration vector prior + observations (not normalized)."""
    p = as_face_vector(prior, "prior")
    o = as_face_vector(observations, "observations")
    return [p[i] + o[i] for i in range(N_FACES)]


def compute_bayes_estimator(posterior: Sequence[float]) -> List[float]:
    """
    Posterior mean of a Dirichlet, i.e. the normalized concentration vector.

    A posterior with zero total yields six zeros.
    """
    alpha = as_face_vector(posterior, "posterior")
    total = sum(alpha)
    if total == 0:
        return [0.0] * N_FACES
    return [a / total for a in alpha]


def compute_map_estimator(prior: Sequence[float], observations: Sequence[float]) -> List[float]:
    """
    Posterior mode of a Dirichlet.

    The closed form only holds when every alpha_i > 1. Outside that regime
    components are clipped at 0 and the denominator is floored at 1, so the
    result is not guaranteed to sum to 1 (it can fall short of or exceed it).
    """
    alpha = compute_posterior(prior, observations)
    denominator = max(1.0, sum(alpha) - N_FACES)
    return [max(0.0, a - 1) / denominator for a in alpha]


def credible_intervals(posterior: Sequence[float], level: float = 0.95) -> List[Tuple[float, float]]:
    """
    Equal-tailed credible interval for each face probability.

    The marginal of component i of Dirichlet(alpha) is
    Beta(alpha_i, sum(alpha) - alpha_i).
    """
    if not 0 < level < 1:
        raise InvalidInput(f"level must be in (0, 1), got {level}")
    alpha = np.array(as_face_vector(posterior, "posterior"))
    if np.any(alpha <= 0):
        raise InvalidInput("credible intervals require every posterior entry to be > 0")

    tail = (1 - level) / 2
    rest = alpha.sum() - alpha
    lower = stats.beta.ppf(tail, alpha, rest)
    upper = stats.beta.ppf(1 - tail, alpha, rest)
    return [(float(lo), float(hi)) for lo, hi in zip(lower, upper)]


class DirichletEstimator:
    """
    Dirichlet-multinomial model of a six-sided die.

    Keeps the prior pseudo-counts and, once fitted, the posterior
    concentration vector.
    """

    def __init__(self, prior: Optional[Sequence[float]] = None):
        """
        Args:
            prior: Dirichlet pseudo-counts per face (uniform 1/6 each by default)
        """
        self.prior = as_face_vector(prior if prior is not None else [1 / N_FACES] * N_FACES, "prior")
        self.counts = None
        self.posterior = None

    def fit(self, counts: Sequence[float]):
        self.counts = as_face_vector(counts, "counts")
        self.posterior = compute_posterior(self.prior, self.counts)
        return self

    def _alpha(self) -> List[float]:
        return self.posterior if self.posterior is not None else self.prior

    def predict(self) -> Dict[str, float]:
        """Posterior mean keyed by face ("1".."6"); the prior mean before fitting."""
        mean = compute_bayes_estimator(self._alpha())
        return {str(face): mean[face - 1] for face in range(1, N_FACES + 1)}

    def map_estimate(self) -> Dict[str, float]:
        counts = self.counts if self.counts is not None else [0.0] * N_FACES
        mode = compute_map_estimator(self.prior, counts)
        return {str(face): mode[face - 1] for face in range(1, N_FACES + 1)}

    def credible_intervals(self, level: float = 0.95) -> Dict[str, Tuple[float, float]]:
        intervals = credible_intervals(self._alpha(), level)
        return {str(face): intervals[face - 1] for face in range(1, N_FACES + 1)}

    def sample(self, n: int, seed: Optional[int] = None) -> np.ndarray:
        """Draw n face distributions from the posterior, shape (n, 6)."""
        alpha = np.array(self._alpha())
        if np.any(alpha <= 0):
            raise InvalidInput("sampling requires every concentration entry to be > 0")
        return stats.dirichlet.rvs(alpha, size=n, random_state=seed)

    def get_params(self) -> Dict:
        """Return model parameters for reproducibility."""
        return {
            "prior": list(self.prior),
            "n_rolls": int(sum(self.counts)) if self.counts is not None else 0,
        }
