"""
dependencies.py — FastAPI Dependency Injection.
Każda zależność zwraca odpowiedni obiekt przez Request.app.state.
"""
from __future__ import annotations

from fastapi import Request

from adapters.reduction import ReductionPipeline
from config import Settings
from ports.tokenizer import Tokenizer


def get_pipeline(request: Request) -> ReductionPipeline:
    return request.app.state.pipeline


def get_tokenizer(request: Request) -> Tokenizer:
    return request.app.state.tokenizer


def get_settings(request: Request) -> Settings:
    return request.app.state.settings
