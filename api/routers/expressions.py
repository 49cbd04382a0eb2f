"""
Router: POST /expressions/parse, /expressions/simplify, /expressions/evaluate

Cienka warstwa nad ReductionPipeline. Błędy ExprError nie są tu łapane —
zamienia je na odpowiedzi JSON handler zarejestrowany w api.main.
"""
from __future__ import annotations

import math

from fastapi import APIRouter, Depends, HTTPException

from adapters.reduction import ReductionPipeline
from api.dependencies import get_pipeline, get_settings, get_tokenizer
from api.schemas import (
    EvaluateRequest,
    EvaluateResponse,
    ParseRequest,
    ParseResponse,
    SimplifyRequest,
    SimplifyResponse,
)
from config import Settings
from contracts import format_number
from ports.tokenizer import Tokenizer

router = APIRouter(prefix="/expressions", tags=["expressions"])


def _check_length(text: str, settings: Settings) -> None:
    if len(text) > settings.max_expression_length:
        raise HTTPException(
            status_code=413,
            detail=f"Expression longer than {settings.max_expression_length} characters",
        )


@router.post("/parse", response_model=ParseResponse)
async def parse_expression(
    body: ParseRequest,
    pipeline: ReductionPipeline = Depends(get_pipeline),
    tokenizer: Tokenizer = Depends(get_tokenizer),
    settings: Settings = Depends(get_settings),
) -> ParseResponse:
    _check_length(body.text, settings)
    ast = pipeline.parse(body.text)
    return ParseResponse(
        text=body.text,
        normalized=tokenizer.normalize(body.text),
        shown=ast.show(),
        ast=ast,
    )


@router.post("/simplify", response_model=SimplifyResponse)
async def simplify_expression(
    body: SimplifyRequest,
    pipeline: ReductionPipeline = Depends(get_pipeline),
    settings: Settings = Depends(get_settings),
) -> SimplifyResponse:
    _check_length(body.text, settings)
    if body.with_steps:
        result = pipeline.simplify_with_steps(body.text)
        ast, steps = result.result, result.steps
    else:
        ast, steps = pipeline.simplify(body.text), []
    return SimplifyResponse(text=body.text, shown=ast.show(), ast=ast, steps=steps)


@router.post("/evaluate", response_model=EvaluateResponse)
async def evaluate_expression(
    body: EvaluateRequest,
    pipeline: ReductionPipeline = Depends(get_pipeline),
    settings: Settings = Depends(get_settings),
) -> EvaluateResponse:
    _check_length(body.text, settings)
    result = pipeline.eval_expr(body.text, body.variables)
    return EvaluateResponse(
        text=body.text,
        value=result.value if math.isfinite(result.value) else None,
        shown_value=format_number(result.value),
        steps=result.steps,
    )
