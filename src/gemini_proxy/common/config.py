"""Process-wide configuration, read once from the environment."""
from __future__ import annotations
import os
from dataclasses import dataclass

DEFAULT_MODEL_ID = "gemini-2.0-flash"

@dataclass(frozen=True)
class ProxyConfig:
    """Settings shared by every request handled by this process."""
    api_key: str | None = None
    model: str = DEFAULT_MODEL_ID
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 8000

    @property
    def has_api_key(self) -> bool:
        return bool(self.api_key)

    @classmethod
    def from_env(cls) -> "ProxyConfig":
        """
        Build the config from environment variables.

        A blank GEMINI_API_KEY is stored as None.
        """
        api_key = (os.getenv("GEMINI_API_KEY") or "").strip() or None
        return cls(
            api_key=api_key,
            model=os.getenv("GEMINI_MODEL_ID", DEFAULT_MODEL_ID),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            host=os.getenv("PROXY_HOST", "127.0.0.1"),
            port=int(os.getenv("PROXY_PORT", "8000")),
        )
