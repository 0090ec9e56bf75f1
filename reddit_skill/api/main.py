"""
FastAPI application exposing the Reddit skill as a voice platform webhook.

The platform POSTs request envelopes to ``/alexa`` and reads the response
envelope from the body.
"""

import logging
import os
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from fastapi import FastAPI, HTTPException, Request

from reddit_skill import __version__
from reddit_skill.config import Config
from reddit_skill.monitoring.metrics import PrometheusExporter
from reddit_skill.skill.base import (
    InvalidApplicationError,
    MalformedRequestError,
    UnsupportedIntentError,
    UnsupportedRequestError,
)
from reddit_skill.skill.reddit_skill import RedditSkill

logger = logging.getLogger(__name__)

APP_NAME = "Reddit Skill"
DEFAULT_CONFIG_PATH = os.getenv("REDDIT_SKILL_CONFIG", "config.yaml")


def create_app(config: Optional[Config] = None, exporter: Optional[PrometheusExporter] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        config: Skill configuration; loaded from ``REDDIT_SKILL_CONFIG`` when omitted
        exporter: Optional Prometheus exporter shared by every request

    Returns:
        FastAPI: Configured FastAPI application instance.
    """
    config = config or Config.from_files(DEFAULT_CONFIG_PATH)

    app = FastAPI(
        title=APP_NAME,
        version=__version__,
        description="Voice skill webhook that reads out Reddit posts.",
        openapi_tags=[
            {"name": "skill", "description": "Voice platform requests"},
            {"name": "health", "description": "Health check and monitoring"},
        ],
    )
    app.state.config = config
    app.state.exporter = exporter

    @app.post("/alexa", tags=["skill"], summary="Handle a voice platform request")
    async def alexa_webhook(request: Request) -> Dict[str, Any]:
        try:
            body = await request.json()
        except ValueError as e:
            raise HTTPException(status_code=400, detail=f"Request body is not JSON: {e}")

        request_type = body.get("request", {}).get("type") if isinstance(body, dict) else None
        logger.info(f"Skill request received: {request_type}")

        # A fresh skill per request; nothing is shared between invocations
        skill = RedditSkill(app.state.config, exporter=app.state.exporter)
        try:
            return await skill.execute(body)
        except InvalidApplicationError as e:
            raise HTTPException(status_code=403, detail=e.message)
        except (MalformedRequestError, UnsupportedRequestError, UnsupportedIntentError) as e:
            logger.warning(f"Rejected skill request: {e.message}")
            raise HTTPException(status_code=400, detail=e.message)

    @app.get("/health", tags=["health"], summary="Health Check")
    async def health_check() -> Dict[str, Any]:
        return {
            "status": "healthy",
            "service": APP_NAME,
            "version": __version__,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

    return app
