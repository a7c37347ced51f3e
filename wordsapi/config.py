import os
from dataclasses import dataclass
from typing import Optional

from dotenv import find_dotenv, load_dotenv

from .client import API_BASE, MASHAPE_HOST, Client


@dataclass(frozen=True)
class Settings:
    api_key: str
    api_base: str = API_BASE
    mashape_host: str = MASHAPE_HOST
    timeout: Optional[float] = None

    def client(self) -> Client:
        return Client(
            self.api_key,
            api_base=self.api_base,
            mashape_host=self.mashape_host,
            timeout=self.timeout,
        )


def _timeout_from_env(raw: Optional[str]) -> Optional[float]:
    if raw is None or not raw.strip():
        return None
    try:
        timeout = float(raw)
    except ValueError:
        raise ValueError(f"WORDSAPI_TIMEOUT must be a number of seconds, got {raw!r}") from None
    if timeout <= 0:
        raise ValueError("WORDSAPI_TIMEOUT must be positive")
    return timeout


def load_settings(dotenv: bool = True) -> Settings:
    """Read the client settings from the environment (and a ``.env`` file)."""
    if dotenv:
        load_dotenv(find_dotenv(usecwd=True))
    api_key = os.environ.get("WORDSAPI_KEY", "").strip()
    if not api_key:
        raise ValueError("WORDSAPI_KEY is not set.")
    return Settings(
        api_key=api_key,
        api_base=os.environ.get("WORDSAPI_BASE_URL") or API_BASE,
        mashape_host=os.environ.get("WORDSAPI_HOST") or MASHAPE_HOST,
        timeout=_timeout_from_env(os.environ.get("WORDSAPI_TIMEOUT")),
    )
