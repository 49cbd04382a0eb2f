"""
config.py — Konfiguracja aplikacji przez zmienne środowiskowe.
Wszystkie zmienne mają prefiks EXPRFOLD_.
"""
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Logging
    log_level: str = "INFO"

    # Arytmetyka: |x| < zero_tolerance traktowane jak zero (dzielenie, x*0, x^1, ...)
    zero_tolerance: float = 1e-10

    # API
    max_expression_length: int = 10_000

    # App
    app_title: str = "ExprFold"
    app_version: str = "0.1.0"

    model_config = SettingsConfigDict(env_prefix="EXPRFOLD_", env_file=".env", extra="ignore")
