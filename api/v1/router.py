# api/v1/router.py
from fastapi import APIRouter

from . import energy

api_router = APIRouter()

api_router.include_router(energy.router, prefix="/energy", tags=["Energy"])
