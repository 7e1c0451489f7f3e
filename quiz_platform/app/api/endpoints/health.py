"""
Liveness endpoint shared by both services.
"""

from typing import Dict

from fastapi import APIRouter, Request


async def health(request: Request) -> Dict[str, str]:
    return {"status": "ok", "service": request.app.state.service_name}


router = APIRouter()
router.add_api_route("/health", health, methods=["GET"], response_model=Dict[str, str])
