"""
V1 API router aggregator — wires all endpoint modules together.
"""

from fastapi import APIRouter

from app.api.v1.endpoints import cart, users

api_router = APIRouter()

# Registration, profile, credential updates
api_router.include_router(users.router)

# Per-user shopping cart
api_router.include_router(cart.router)
