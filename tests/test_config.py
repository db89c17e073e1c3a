from dicelab.config import Settings


def test_default_settings():
    config = Settings()

    assert config.biased_weights == [0.14, 0.14, 0.14, 0.14, 0.14, 0.30]
    assert config.default_prior == [1 / 6] * 6
    assert config.credible_level == 0.95


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("DICELAB_RANDOM_SEED", "7")
    monkeypatch.setenv("DICELAB_DEFAULT_PRIOR", "[1, 1, 1, 1, 1, 1]")

    config = Settings()

    assert config.random_seed == 7
    assert config.default_prior == [1.0] * 6
