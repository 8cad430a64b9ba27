"""
API Router.

Aggregates all report endpoints under /api.
"""

from fastapi import APIRouter
from accounting_api.app.api.endpoints import reports

router = APIRouter()

router.include_router(reports.router)
