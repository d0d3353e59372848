# File: app/api/v1/api.py
from fastapi import APIRouter
from app.api.v1.endpoints import inventory

# Create main API router
api_router = APIRouter()

api_router.include_router(
    inventory.router,
    prefix="/items",
    tags=["inventory"]
)
