"""
Gemini Proxy package.

Provides:
- A FastAPI handler that forwards prompts to Gemini with a server-held API key
- Serverless (Mangum) and local (uvicorn) entry points
"""
