"""Health check endpoint."""

import time
from fastapi import APIRouter, Request

from complianceiq.models.responses import HealthResponse, HealthDependency
from complianceiq.validators import RuleCatalogError, load_rule_catalog
from complianceiq.config import get_settings

router = APIRouter()

_start_time = time.time()


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request):
    """System health check with dependency status."""
    dependencies = {}

    # Check Redis
    try:
        redis = request.app.state.redis
        if redis is None:
            raise ConnectionError("Redis client not initialized")
        start = time.time()
        await redis.ping()
        latency = (time.time() - start) * 1000
        dependencies["redis"] = HealthDependency(status="healthy", latency_ms=round(latency, 2))
    except Exception as e:
        dependencies["redis"] = HealthDependency(status="unhealthy", message=str(e))

    # Check rule catalog
    try:
        rules = load_rule_catalog(get_settings().RULES_PATH or None)
        dependencies["rule_catalog"] = HealthDependency(
            status="healthy", message=f"{len(rules)} rules loaded"
        )
    except RuleCatalogError as e:
        dependencies["rule_catalog"] = HealthDependency(status="unhealthy", message=str(e))

    # Overall status
    all_healthy = all(d.status == "healthy" for d in dependencies.values())
    all_unhealthy = all(d.status == "unhealthy" for d in dependencies.values())

    if all_healthy:
        status = "healthy"
    elif all_unhealthy:
        status = "unhealthy"
    else:
        status = "degraded"

    return HealthResponse(
        status=status,
        uptime_seconds=round(time.time() - _start_time, 2),
        dependencies=dependencies,
    )
