"""
api/main.py — punkt wejścia FastAPI.

Lifespan:
  - Tworzy ReductionPipeline (parser, simplifier, evaluator) z ustawień
  - Udostępnia pipeline i tokenizer przez app.state

Błędy ExprError zamieniane są na JSON {detail, code, expression}:
  ParseError / ConstructionError → 422, EvaluationError → 400.
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from adapters.reduction import ReductionPipeline
from adapters.tokenizer.infix_tokenizer import InfixTokenizer
from api.routers import expressions
from api.schemas import ErrorResponse, HealthResponse
from config import Settings
from errors import EvaluationError, ExprError

logger = logging.getLogger("exprfold.api")


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings

    # Adaptery bezstanowe — tworzone raz
    app.state.tokenizer = InfixTokenizer()
    app.state.pipeline = ReductionPipeline.default(settings)

    logger.info("ExprFold API ready (zero_tolerance=%g).", settings.zero_tolerance)
    yield
    logger.info("Shutting down.")


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings()
    logging.basicConfig(level=settings.log_level.upper())

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.settings = settings

    # Routers
    app.include_router(expressions.router)

    # Health
    @app.get("/health", response_model=HealthResponse, tags=["health"])
    async def health():
        return HealthResponse(status="ok", version=settings.app_version)

    # Globalny handler błędów wyrażeń
    @app.exception_handler(ExprError)
    async def expr_error_handler(request: Request, exc: ExprError):
        status_code = 400 if isinstance(exc, EvaluationError) else 422
        logger.warning("%s %s failed: %s", request.method, request.url.path, exc.message)
        body = ErrorResponse(detail=exc.message, code=exc.code, expression=exc.expression)
        return JSONResponse(status_code=status_code, content=body.model_dump())

    return app


app = create_app()
