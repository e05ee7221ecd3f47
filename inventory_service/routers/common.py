# inventory_service/routers/common.py

"""
Request helpers shared by the routers.
"""
import json
import logging
from typing import Any

from fastapi import Request

logger = logging.getLogger(__name__)


async def read_json_body(request: Request) -> Any:
    """
    Dependency returning the decoded JSON body, or None when the body is empty
    or not valid JSON. Never fails, so it cannot pre-empt the session check.
    """
    raw = await request.body()
    if not raw:
        return None
    try:
        return json.loads(raw)
    except ValueError:
        logger.info("Request body is not valid JSON.")
        return None
