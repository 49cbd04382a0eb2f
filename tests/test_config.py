from config import Settings


def test_settings_defaults():
    settings = Settings()

    assert settings.zero_tolerance == 1e-10
    assert settings.log_level == "INFO"
    assert settings.max_expression_length == 10_000


def test_settings_read_prefixed_environment(monkeypatch):
    monkeypatch.setenv("EXPRFOLD_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("EXPRFOLD_MAX_EXPRESSION_LENGTH", "64")

    settings = Settings()

    assert settings.log_level == "DEBUG"
    assert settings.max_expression_length == 64
