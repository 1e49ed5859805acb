"""
Top‑level router of the API.

Aggregates the endpoint routers.  Customer routes live under the
``/customers`` prefix; the health check sits at the root.
"""

from fastapi import APIRouter

from .endpoints import customers, health

router = APIRouter()

router.include_router(customers.router, prefix="/customers", tags=["customers"])
router.include_router(health.router, tags=["health"])
