"""
API v1 router
"""
from fastapi import APIRouter
from call_analyzer.api.v1 import calls

api_router = APIRouter()

api_router.include_router(calls.router, prefix="/calls", tags=["calls"])
