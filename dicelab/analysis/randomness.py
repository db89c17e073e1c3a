import numpy as np
from typing import Dict, Any, List, Optional, Sequence
from scipy.stats import binomtest, chisquare
from statsmodels.stats.multitest import multipletests

from dicelab.analysis import N_FACES, as_face_vector
from dicelab.analysis.sampler import normalize_weights


class FairnessTests:
    def __init__(
        self,
        counts: Sequence[int],
        weights: Optional[Sequence[float]] = None,
        alpha: float = 0.05,
    ):
        self.counts = [int(c) for c in as_face_vector(counts, "counts")]
        if weights is None:
            weights = [1.0 / N_FACES] * N_FACES
        self.weights = normalize_weights(weights)
        self.alpha = alpha
        self.n_rolls = sum(self.counts)
        self.warnings = []

    def run_all_tests(self) -> Dict[str, Any]:
        tests = {
            "uniformity": self._test_goodness_of_fit(),
            "per_face": self._test_per_face(),
        }

        face_names = [f"face_{face}" for face in range(1, N_FACES + 1)]
        pvalues = [
            tests["per_face"][name]["p_value"]
            for name in face_names
            if "p_value" in tests["per_face"].get(name, {})
        ]

        if len(pvalues) == N_FACES:
            reject, pvals_corrected, _, _ = multipletests(pvalues, alpha=self.alpha, method="fdr_bh")
            tests["fdr_correction"] = {
                "method": "Benjamini-Hochberg",
                "corrected_pvalues": {
                    name: float(pval) for name, pval in zip(face_names, pvals_corrected)
                },
                "rejected": {name: bool(rej) for name, rej in zip(face_names, reject)},
            }

        return tests

    def _test_goodness_of_fit(self) -> Dict[str, Any]:
        if self.n_rolls == 0:
            self.warnings.append("No rolls observed: goodness-of-fit test skipped")
            return {}
        if np.any(self.weights == 0):
            self.warnings.append("Hypothesized weights contain a zero: goodness-of-fit test skipped")
            return {}

        expected = self.weights * self.n_rolls
        chi2_stat, p_value = chisquare(self.counts, expected)

        return {
            "chi2_faces": {
                "statistic": float(chi2_stat),
                "p_value": float(p_value),
                "df": N_FACES - 1,
                "interpretation": (
                    "Reject H0: faces deviate from hypothesis"
                    if p_value < self.alpha
                    else "Fail to reject H0: consistent with hypothesis"
                ),
            }
        }

    def _test_per_face(self) -> Dict[str, Any]:
        if self.n_rolls == 0:
            return {}

        result = {}
        for i, count in enumerate(self.counts):
            test = binomtest(count, self.n_rolls, float(self.weights[i]))
            result[f"face_{i + 1}"] = {
                "observed": count / self.n_rolls,
                "expected": float(self.weights[i]),
                "p_value": float(test.pvalue),
            }
        return result

    def get_warnings(self) -> List[str]:
        return self.warnings
