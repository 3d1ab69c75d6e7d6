"""Main API router — combines all endpoint routers."""

from fastapi import APIRouter

from complianceiq.api.health import router as health_router
from complianceiq.api.validation import router as validation_router
from complianceiq.api.documents import router as documents_router

api_router = APIRouter()

# Health check
api_router.include_router(health_router, tags=["Health"])

# Stateless validation, rule catalog, samples
api_router.include_router(validation_router, tags=["Validation"])

# Document records
api_router.include_router(documents_router, tags=["Documents"])
