"""API router composition."""

from fastapi import APIRouter

from usuarios_api.api.endpoints import usuarios

api_router: APIRouter = APIRouter()
api_router.include_router(usuarios.router, prefix="/usuarios", tags=["usuarios"])
