"""Run the proxy locally under uvicorn."""
from __future__ import annotations
import argparse
import logging

import uvicorn

from gemini_proxy.common.config import ProxyConfig
from gemini_proxy.common.logging_setup import resolve_level, setup_logging

LOGGER = logging.getLogger("gemini_proxy.local")

def build_parser(config: ProxyConfig) -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Serve the Gemini proxy locally")
    ap.add_argument("--host", default=config.host)
    ap.add_argument("--port", type=int, default=config.port)
    ap.add_argument("--reload", action="store_true", help="Restart on code changes")
    return ap

def main(argv: list[str] | None = None) -> None:
    config = ProxyConfig.from_env()
    setup_logging(config.log_level)
    args = build_parser(config).parse_args(argv)

    LOGGER.info("Serving on http://%s:%s (model=%s)", args.host, args.port, config.model)
    uvicorn.run(
        "gemini_proxy.serve.fastapi_app:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=resolve_level(config.log_level),
    )

if __name__ == "__main__":
    main()
