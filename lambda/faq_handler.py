"""Lambda handler for FAQ requests — triggered by API Gateway.

Thin wrapper around FAQService. All business logic lives in src/vanfaq/.

Routes:
    POST /faq          {"question": "..."} → answer, sources, confidence, followUp
    GET  /faq/stats    index statistics
    GET  /faq/health   readiness check
    POST /faq/reload   re-read the document directory
"""

from __future__ import annotations

import asyncio
import json
import logging
import os
import time
from typing import Any

from vanfaq.config import load_settings
from vanfaq.pipeline.service import FAQService

logger = logging.getLogger(__name__)
logger.setLevel(os.getenv("LOG_LEVEL", "INFO"))

# Initialize outside handler for Lambda warm-start reuse
_service: FAQService | None = None
_loop: asyncio.AbstractEventLoop | None = None


def _get_service() -> FAQService:
    global _service
    if _service is None:
        _service = FAQService(settings=load_settings())
    return _service


def _run(coro):
    """Run on one long-lived loop so the service's lock and load task stay valid."""
    global _loop
    if _loop is None or _loop.is_closed():
        _loop = asyncio.new_event_loop()
    return _loop.run_until_complete(coro)


def _response(status: int, payload: dict[str, Any]) -> dict[str, Any]:
    return {
        "statusCode": status,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(payload),
    }


def _route(event: dict[str, Any]) -> tuple[str, str]:
    """Extract (method, path) from a REST (v1) or HTTP (v2) API event."""
    http = event.get("requestContext", {}).get("http", {})
    method = event.get("httpMethod") or http.get("method", "")
    path = event.get("path") or event.get("rawPath", "")
    return method.upper(), path.rstrip("/")


def _validate_question(body: dict[str, Any]) -> tuple[str | None, str | None]:
    """Return (question, error)."""
    question = body.get("question")
    if not isinstance(question, str) or not question.strip():
        return None, "A non-empty question is required"

    max_chars = _get_service().settings.api.max_question_chars
    question = question.strip()
    if len(question) > max_chars:
        return None, f"Question must be {max_chars} characters or fewer"
    return question, None


def _answer(event: dict[str, Any]) -> dict[str, Any]:
    try:
        body = json.loads(event.get("body") or "{}")
    except (json.JSONDecodeError, TypeError):
        body = {}
    if not isinstance(body, dict):
        body = {}

    question, error = _validate_question(body)
    if error:
        return _response(400, {"error": error})

    start = time.perf_counter()
    result = _run(_get_service().answer(question))
    payload = result.to_dict()
    payload["responseTimeMs"] = int((time.perf_counter() - start) * 1000)
    return _response(200, payload)


def handler(event: dict[str, Any], context: Any) -> dict[str, Any]:
    """Handle API Gateway request — dispatch by route, return JSON."""
    method, path = _route(event)

    try:
        if method == "POST" and path.endswith("/faq/reload"):
            stats = _run(_get_service().reload())
            return _response(200, {"message": "Vector store reloaded", **stats.to_dict()})
        if method == "GET" and path.endswith("/faq/stats"):
            return _response(200, _run(_get_service().stats()).to_dict())
        if method == "GET" and path.endswith("/faq/health"):
            return _response(200, _run(_get_service().health()))
        if method == "POST" and path.endswith("/faq"):
            return _answer(event)
    except Exception:
        logger.exception("FAQ request failed: %s %s", method, path)
        return _response(500, {"error": "Internal server error"})

    return _response(404, {"error": f"No route for {method} {path}"})
