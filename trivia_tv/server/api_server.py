"""FastAPI server exposing the trivia retrieval endpoint."""

from __future__ import annotations

import logging
from threading import Thread

from fastapi import Depends, FastAPI, Query
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field
import uvicorn

from trivia_tv.constants.about import APP_NAME, APP_VERSION
from trivia_tv.constants.network_constants import DEFAULT_HOST, DEFAULT_PORT
from trivia_tv.core.models import TriviaItem
from trivia_tv.core.services.trivia_retrieval import MissingCountryError
from trivia_tv.core.trivia_manager import TriviaManager

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error while fetching trivia"


class TriviaItemPayload(BaseModel):
    """Wire schema for a single trivia item."""

    model_config = ConfigDict(populate_by_name=True)

    country: str
    period: str
    question: str
    answer: str
    fun_fact: str | None = Field(default=None, alias="funFact")

    @classmethod
    def from_item(cls, item: TriviaItem) -> "TriviaItemPayload":
        return cls(
            country=item.country,
            period=item.period,
            question=item.question,
            answer=item.answer,
            fun_fact=item.fun_fact,
        )


class TriviaResponse(BaseModel):
    items: list[TriviaItemPayload]


class CatalogResponse(BaseModel):
    countries: list[str]
    periods: list[str]


class ErrorResponse(BaseModel):
    error: str


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


def _get_trivia_manager_dependency(trivia_manager: TriviaManager):
    def dependency() -> TriviaManager:
        return trivia_manager

    return dependency


def create_api_app(trivia_manager: TriviaManager) -> FastAPI:
    """Create a FastAPI application wired to the provided trivia manager."""
    app = FastAPI(title=f"{APP_NAME} API", version=APP_VERSION)
    trivia_manager_dep = _get_trivia_manager_dependency(trivia_manager)

    @app.get(
        "/api/trivia",
        response_model=TriviaResponse,
        response_model_exclude_none=True,
        responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    )
    def get_trivia(
        country: str | None = None,
        countries: str | None = None,
        period: str | None = None,
        count: int | None = Query(default=None, ge=1),
        manager: TriviaManager = Depends(trivia_manager_dep),
    ):
        try:
            items = manager.fetch_trivia(
                country=country,
                period=period,
                countries=countries,
                limit=count,
            )
        except MissingCountryError as exc:
            return _error_response(400, str(exc))
        except Exception:
            logger.exception("Trivia retrieval failed for country=%s period=%s", country, period)
            return _error_response(500, INTERNAL_ERROR_MESSAGE)
        return TriviaResponse(items=[TriviaItemPayload.from_item(item) for item in items])

    @app.get("/api/catalog", response_model=CatalogResponse)
    def get_catalog(manager: TriviaManager = Depends(trivia_manager_dep)) -> CatalogResponse:
        return CatalogResponse(countries=manager.get_countries(), periods=manager.get_periods())

    return app


def start_api_server(
    trivia_manager: TriviaManager,
    host: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
) -> Thread:
    """Start the FastAPI server in a background daemon thread."""
    app = create_api_app(trivia_manager)
    config = uvicorn.Config(app=app, host=host, port=port, log_level="info")
    server = uvicorn.Server(config)

    def run_server() -> None:
        server.run()

    thread = Thread(target=run_server, name="TriviaApiServer", daemon=True)
    thread.start()
    logger.info("Trivia API listening on http://%s:%d/api/trivia", host, port)
    return thread
