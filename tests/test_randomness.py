import pytest

from dicelab.analysis import InvalidInput
from dicelab.analysis.randomness import FairnessTests
from dicelab.analysis.sampler import BIASED_WEIGHTS


def test_chi2_uniform_counts():
    tester = FairnessTests([1000, 1000, 1000, 1000, 1000, 1000])

    results = tester.run_all_tests()

    assert "uniformity" in results
    chi2 = results["uniformity"]["chi2_faces"]
    assert chi2["statistic"] < 1e-9
    assert chi2["p_value"] > 0.99
    assert chi2["df"] == 5
    assert chi2["interpretation"].startswith("Fail to reject")


def test_chi2_detects_biased_die():
    tester = FairnessTests([700, 700, 700, 700, 700, 1500])

    results = tester.run_all_tests()

    assert results["uniformity"]["chi2_faces"]["p_value"] < 0.001
    assert results["uniformity"]["chi2_faces"]["interpretation"].startswith("Reject")


def test_counts_consistent_with_biased_hypothesis():
    tester = FairnessTests([700, 700, 700, 700, 700, 1500], weights=BIASED_WEIGHTS)

    results = tester.run_all_tests()

    assert results["uniformity"]["chi2_faces"]["p_value"] > 0.5


def test_fdr_correction_flags_favoured_face():
    tester = FairnessTests([700, 700, 700, 700, 700, 1500])

    results = tester.run_all_tests()

    assert "fdr_correction" in results
    assert results["fdr_correction"]["method"] == "Benjamini-Hochberg"
    assert set(results["fdr_correction"]["corrected_pvalues"]) == {f"face_{i}" for i in range(1, 7)}
    assert results["fdr_correction"]["rejected"]["face_6"] is True


def test_per_face_details():
    results = FairnessTests([10, 20, 30, 40, 50, 50]).run_all_tests()

    face = results["per_face"]["face_1"]
    assert face["observed"] == 10 / 200
    assert abs(face["expected"] - 1 / 6) < 1e-12
    assert 0 <= face["p_value"] <= 1


def test_no_rolls_skips_tests():
    tester = FairnessTests([0, 0, 0, 0, 0, 0])

    results = tester.run_all_tests()

    assert results["uniformity"] == {}
    assert results["per_face"] == {}
    assert "fdr_correction" not in results
    assert len(tester.get_warnings()) == 1


def test_zero_weight_hypothesis_skips_chi2():
    tester = FairnessTests([10, 10, 10, 10, 10, 0], weights=[1, 1, 1, 1, 1, 0])

    results = tester.run_all_tests()

    assert results["uniformity"] == {}
    assert "fdr_correction" in results
    assert tester.get_warnings()


def test_rejects_malformed_counts():
    with pytest.raises(InvalidInput):
        FairnessTests([1, 2, 3])
