"""FastAPI proxy for the Gemini text generation API.

Endpoints:
- GET /health
- POST / and POST /api/gemini  { "prompt": "..." }

Any other method on the proxy paths is answered with 405.
"""
from __future__ import annotations
import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from gemini_proxy.common.config import ProxyConfig
from gemini_proxy.common.generator import GeminiTextGenerator, TextGenerator
from gemini_proxy.common.logging_setup import setup_logging
from gemini_proxy.common.schema import (
    GENERATION_FAILED,
    METHOD_NOT_ALLOWED,
    MISSING_PROMPT,
    ProxyResponse,
)

LOGGER = logging.getLogger("gemini_proxy.app")

PROXY_PATHS = ("/", "/api/gemini")
ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

def _envelope(status_code: int, body: ProxyResponse, headers: dict[str, str] | None = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=body.to_json(), headers=headers)


async def _read_prompt(request: Request) -> str | None:
    """Return the prompt from a JSON object body, or None when absent or empty."""
    try:
        data: Any = await request.json()
    except (ValueError, RecursionError):
        return None
    if not isinstance(data, dict):
        return None
    prompt = data.get("prompt")
    if not prompt or not isinstance(prompt, str):
        return None
    return prompt


def create_app(config: ProxyConfig | None = None, generator: TextGenerator | None = None) -> FastAPI:
    """
    Build the proxy application.

    Args:
        config: Process configuration; read from the environment when omitted.
        generator: Text generation backend; Gemini when omitted.
    """
    config = config or ProxyConfig.from_env()
    generator = generator or GeminiTextGenerator(api_key=config.api_key, model=config.model)
    if not config.has_api_key:
        LOGGER.error(
            "Gemini API key is not set. Configure it as an environment variable named GEMINI_API_KEY."
        )

    app = FastAPI(title="Gemini Proxy")
    app.state.config = config
    app.state.generator = generator

    @app.exception_handler(StarletteHTTPException)
    async def method_not_allowed(request: Request, exc: StarletteHTTPException) -> Response:
        # methods outside ALL_METHODS never reach handle
        if exc.status_code == 405 and request.url.path in PROXY_PATHS:
            return _envelope(405, ProxyResponse.fail(METHOD_NOT_ALLOWED), headers={"Allow": "POST"})
        return await http_exception_handler(request, exc)

    @app.get("/health")
    def health() -> dict[str, Any]:
        return {"status": "ok", "model": config.model, "gemini_configured": config.has_api_key}

    async def handle(request: Request) -> JSONResponse:
        if request.method != "POST":
            return _envelope(405, ProxyResponse.fail(METHOD_NOT_ALLOWED), headers={"Allow": "POST"})

        prompt = await _read_prompt(request)
        if prompt is None:
            return _envelope(400, ProxyResponse.fail(MISSING_PROMPT))

        try:
            text = await generator.generate(prompt)
        except Exception as e:
            LOGGER.exception("Error calling Gemini API: %s", e)
            return _envelope(500, ProxyResponse.fail(GENERATION_FAILED, details=str(e)))

        return _envelope(200, ProxyResponse.ok(text))

    for path in PROXY_PATHS:
        app.add_api_route(path, handle, methods=ALL_METHODS, include_in_schema=path != "/")

    return app


_config = ProxyConfig.from_env()
setup_logging(_config.log_level)
app = create_app(_config)
