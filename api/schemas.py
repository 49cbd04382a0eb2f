"""
schemas.py — Request/Response modele FastAPI.
Oddzielone od contracts.py żeby API mogło ewoluować niezależnie.
"""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from contracts import ExprAST


# ─────────────────────────── /expressions/parse ──────────────────

class ParseRequest(BaseModel):
    text: str = Field(..., min_length=1)


class ParseResponse(BaseModel):
    text: str
    normalized: str   # tekst po niejawnym mnożeniu i unarnym minusie
    shown: str
    ast: ExprAST


# ─────────────────────────── /expressions/simplify ───────────────

class SimplifyRequest(BaseModel):
    text: str = Field(..., min_length=1)
    with_steps: bool = False


class SimplifyResponse(BaseModel):
    text: str
    shown: str
    ast: ExprAST
    steps: list[str] = []


# ─────────────────────────── /expressions/evaluate ───────────────

class EvaluateRequest(BaseModel):
    text: str = Field(..., min_length=1)
    variables: dict[str, float] = {}


class EvaluateResponse(BaseModel):
    text: str
    value: Optional[float]   # None dla nan/inf (JSON ich nie zna)
    shown_value: str
    steps: list[str]


# ─────────────────────────── błędy ───────────────────────────────

class ErrorResponse(BaseModel):
    detail: str
    code: str
    expression: Optional[str] = None


# ─────────────────────────── /health ─────────────────────────────

class HealthResponse(BaseModel):
    status: str
    version: str
