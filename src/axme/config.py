from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Mapping, Optional
import logging
import os

import httpx


BASE_URL_ENV = "AXME_BASE_URL"
API_KEY_ENV = "AXME_API_KEY"


@dataclass
class ClientConfig:
    base_url: str = ""
    api_key: str = ""
    http_client: Optional[httpx.Client] = None
    timeout: float = 30.0

    logger: Optional[logging.Logger] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **overrides: Any) -> "ClientConfig":
        """
        Build a config from AXME_BASE_URL / AXME_API_KEY. Keyword overrides win over the environment.
        """
        env = os.environ if environ is None else environ
        values: dict = {
            "base_url": env.get(BASE_URL_ENV, ""),
            "api_key": env.get(API_KEY_ENV, ""),
        }
        values.update(overrides)
        return cls(**values)
