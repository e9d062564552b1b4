"""
threat-entities Web API
FastAPI backend for validating and normalizing threat-intelligence values
"""

from datetime import datetime, timezone
from typing import Any, Optional

import uvicorn
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from threat_entities import __version__
from threat_entities.config import Settings, configure_logging, load_settings
from threat_entities.entity import normalize_attributes
from threat_entities.output import outcome_record
from threat_entities.registry import TypeRegistry, build_registry
from threat_entities.validate import validate

MAX_BATCH_SIZE = 500


class ValidateRequest(BaseModel):
    value: Any
    type: str


class BatchRequest(BaseModel):
    type: str
    values: list[Any]


class NormalizeRequest(BaseModel):
    attributes: dict[str, Any]


def _require_type(registry: TypeRegistry, type_name: str) -> None:
    if type_name not in registry:
        raise HTTPException(status_code=404, detail=f"unknown type: {type_name}")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or load_settings()
    configure_logging(settings)
    registry = build_registry(settings)

    app = FastAPI(
        title="threat-entities",
        description="Typed validation and canonicalization of threat-intelligence values",
        version=__version__,
    )

    @app.get("/api/health")
    async def health():
        """Health check endpoint"""
        return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}

    @app.get("/api/types")
    async def list_types():
        """List known type names and their data kinds"""
        return {
            "types": [
                {"name": n, "kind": registry.resolve(n).value} for n in registry.list_names()
            ]
        }

    @app.post("/api/validate")
    async def validate_value(request: ValidateRequest):
        """Validate a single value"""
        _require_type(registry, request.type)
        return validate(request.value, request.type, registry=registry).to_dict()

    @app.post("/api/validate/batch")
    async def validate_batch(request: BatchRequest):
        """Validate multiple values against one type"""
        if len(request.values) > MAX_BATCH_SIZE:
            raise HTTPException(
                status_code=400, detail=f"Maximum {MAX_BATCH_SIZE} values per batch"
            )
        _require_type(registry, request.type)

        results = [
            outcome_record(v, validate(v, request.type, registry=registry))
            for v in request.values
        ]
        summary = {
            "total": len(results),
            "valid": sum(1 for r in results if r["error"] is None),
            "rejected": sum(1 for r in results if r["error"] is not None),
        }
        return {"summary": summary, "results": results}

    @app.post("/api/normalize")
    async def normalize(request: NormalizeRequest):
        """Normalize a map of raw attributes"""
        attrs, errors = normalize_attributes(request.attributes, registry=registry)
        return {"attributes": attrs.export(), "errors": errors}

    return app


if __name__ == "__main__":
    uvicorn.run(create_app(), host="0.0.0.0", port=8000)
