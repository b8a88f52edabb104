"""API v1 router registration."""

from fastapi import APIRouter

from wallet_splits.api.routes import dues, groups

v1_router = APIRouter(prefix="/v1")
v1_router.include_router(dues.router)
v1_router.include_router(groups.router)
