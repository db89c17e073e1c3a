"""
Dice simulation and Dirichlet-multinomial estimation of face probabilities.
"""

from dicelab.analysis import N_FACES, InvalidInput
from dicelab.analysis.bayes import (
    DirichletEstimator,
    compute_bayes_estimator,
    compute_map_estimator,
    compute_posterior,
    credible_intervals,
)
from dicelab.analysis.frequencies import compute_probabilities, count_rolls
from dicelab.analysis.sampler import (
    BIASED_WEIGHTS,
    UniformSampler,
    WeightedSampler,
    build_cumulative,
    create_sampler,
    select_face,
)

__all__ = [
    "N_FACES",
    "BIASED_WEIGHTS",
    "InvalidInput",
    "create_sampler",
    "build_cumulative",
    "select_face",
    "UniformSampler",
    "WeightedSampler",
    "compute_probabilities",
    "count_rolls",
    "compute_posterior",
    "compute_bayes_estimator",
    "compute_map_estimator",
    "credible_intervals",
    "DirichletEstimator",
]
