"""Serverless entry point (AWS Lambda, Vercel) wrapping the ASGI app with Mangum."""
from __future__ import annotations

from mangum import Mangum

from gemini_proxy.serve.fastapi_app import app

handler = Mangum(app, lifespan="off")
