"""
Main API router.
"""

from fastapi import APIRouter
from fintrack.api import transactions

api_router = APIRouter()

api_router.include_router(transactions.router)
