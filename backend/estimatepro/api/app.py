"""FastAPI application: create_app factory with /api endpoints."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING, Any

from dotenv import load_dotenv
from fastapi import Body, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Load .env from project root (backend/../.env or backend/.env)
_backend_dir = Path(__file__).resolve().parent.parent.parent
_project_root = _backend_dir.parent
load_dotenv(_project_root / ".env")
load_dotenv(_backend_dir / ".env")

from estimatepro.engine import ENGINE_VERSION, EstimateEngine
from estimatepro.exceptions import RateTableError, UnknownServiceError, ValidationError
from estimatepro.models.estimate import ServiceRequest  # noqa: TCH001 (FastAPI resolves at runtime)
from estimatepro.registry import CALCULATOR_CLASSES

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from estimatepro.registry import CalculatorRegistry

logger = logging.getLogger(__name__)

CORS_ORIGINS_ENV = "ESTIMATEPRO_CORS_ORIGINS"
DEFAULT_CORS_ORIGINS = "http://localhost:3000"


class EstimateRequest(BaseModel):
    """Body of POST /api/estimate."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    project_name: str
    services: list[ServiceRequest] = Field(default_factory=list)


def _cors_origins() -> list[str]:
    raw = os.environ.get(CORS_ORIGINS_ENV, DEFAULT_CORS_ORIGINS)
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def create_app(*, registry: CalculatorRegistry | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    registry
        Optional pre-built calculator registry for dependency injection
        (e.g. tests with their own rate table). If not provided, one is
        created via create_default_registry on first request.
    """
    app = FastAPI(title="EstimatePro", version=ENGINE_VERSION)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=_cors_origins(),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Store on app state so tests can inject their own rates
    app.state.registry = registry

    def _get_registry() -> CalculatorRegistry:
        reg: CalculatorRegistry | None = app.state.registry
        if reg is not None:
            return reg
        from estimatepro.factory import create_default_registry

        reg = create_default_registry()
        app.state.registry = reg
        return reg

    def _run(action: Callable[[], Any]) -> Any:
        """Run a pricing call, mapping domain errors to HTTP errors."""
        try:
            return action()
        except ValidationError as exc:
            logger.warning("Rejected request: %s", exc)
            raise HTTPException(
                status_code=422,
                detail={"field": exc.field, "message": exc.message},
            ) from exc
        except UnknownServiceError as exc:
            logger.warning("Rejected request: %s", exc)
            raise HTTPException(status_code=404, detail=str(exc)) from exc
        except RateTableError as exc:
            logger.exception("Rate table error")
            raise HTTPException(status_code=500, detail=str(exc)) from exc

    # ------------------------------------------------------------------
    # GET /api/health
    # ------------------------------------------------------------------

    @app.get("/api/health")
    def health() -> dict[str, str]:
        return {"status": "ok", "version": ENGINE_VERSION}

    # ------------------------------------------------------------------
    # GET /api/services
    # ------------------------------------------------------------------

    @app.get("/api/services")
    def services() -> list[dict[str, Any]]:
        rate_table = _run(lambda: _get_registry().rate_table)

        def _catalog() -> Iterator[dict[str, Any]]:
            for service_type, cls in CALCULATOR_CLASSES.items():
                yield {
                    "code": service_type.value,
                    "name": cls.service_name,
                    "description": cls.description,
                    "pricedByHour": cls.priced_by_hour,
                    "locations": rate_table.locations(service_type),
                }

        return list(_catalog())

    # ------------------------------------------------------------------
    # POST /api/calculate/{service_code}
    # ------------------------------------------------------------------

    @app.post("/api/calculate/{service_code}")
    def calculate(
        service_code: str,
        inputs: dict[str, Any] = Body(...),
    ) -> dict[str, Any]:
        result = _run(lambda: _get_registry().calculate(service_code, inputs))
        return result.to_record()

    # ------------------------------------------------------------------
    # POST /api/estimate
    # ------------------------------------------------------------------

    @app.post("/api/estimate")
    def estimate(body: EstimateRequest) -> dict[str, Any]:
        def _estimate() -> dict[str, Any]:
            engine = EstimateEngine(_get_registry())
            est = engine.estimate(body.project_name, body.services)
            return {
                "estimate": est.model_dump(mode="json", by_alias=True),
                "summaryDict": est.to_summary_dict(),
                "exportDict": est.to_export_dict(),
            }

        return _run(_estimate)

    return app
