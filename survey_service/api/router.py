"""
API router - aggregates all endpoint modules.
Routes: GET / (question), POST / (answer), GET /health, GET /ready.
"""

from fastapi import APIRouter

from survey_service.api.endpoints import health, survey

api_router = APIRouter()

api_router.include_router(survey.router, tags=["survey"])
api_router.include_router(health.router, tags=["health"])
