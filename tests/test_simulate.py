import json

import pytest

from dicelab.simulate import main, run_simulation


def test_run_simulation_both_dice():
    report = run_simulation(["biased", "unbiased"], 300, seed=1)

    assert set(report) == {"biased", "unbiased"}
    for entry in report.values():
        assert entry["n_rolls"] == 300
        assert sum(entry["counts"]) == 300
        assert abs(sum(entry["bayes_estimator"]) - 1.0) < 1e-9
        assert len(entry["credible_intervals"]) == 6


def test_run_simulation_with_prior_and_tests():
    report = run_simulation(["biased"], 0, seed=1, prior=[1, 1, 1, 1, 1, 1], with_tests=True)

    entry = report["biased"]
    assert entry["prior"] == [1.0] * 6
    assert entry["bayes_estimator"] == [1 / 6] * 6
    assert entry["fairness_tests"]["uniformity"] == {}
    assert entry["warnings"]


def test_main_prints_json(capsys):
    assert main(["--mode", "biased", "--rolls", "50", "--seed", "3", "--tests"]) == 0

    report = json.loads(capsys.readouterr().out)
    assert list(report) == ["biased"]
    assert report["biased"]["n_rolls"] == 50
    assert "fdr_correction" in report["biased"]["fairness_tests"]


def test_main_reports_code_version(capsys):
    assert main(["--mode", "unbiased", "--rolls", "5", "--seed", "2"]) == 0

    report = json.loads(capsys.readouterr().out)
    assert report["unbiased"]["code_version"] == "v1.0.0"


def test_main_rejects_negative_prior(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["--mode", "biased", "--rolls", "5", "--prior", "-1", "1", "1", "1", "1", "1"])

    assert exc_info.value.code == 2
    assert "prior[0] is negative" in capsys.readouterr().err
