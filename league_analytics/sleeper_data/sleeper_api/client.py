"""Sleeper API client: JSON GETs with an on-disk response cache."""

from __future__ import annotations

import hashlib
import json
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Any, Mapping, Optional

import requests

logger = logging.getLogger(__name__)


class SleeperApiError(RuntimeError):
    """Raised for Sleeper API request failures."""


@dataclass(frozen=True)
class SleeperClient:
    base_url: str = "https://api.sleeper.app/v1/"
    timeout_seconds: int = 10
    # Responses are fetched fresh unless a cache directory is given.
    cache_dir: Optional[Path] = None
    cache_ttl: timedelta = timedelta(days=1)

    def get_json(
        self, path: str, params: Optional[Mapping[str, Any]] = None
    ) -> Any:
        url = f"{self.base_url.rstrip('/')}/{path.lstrip('/')}"
        cache_path = self._cache_path(path, params)
        if cache_path is not None:
            cached_payload = _read_cached_payload(cache_path, self.cache_ttl)
            if cached_payload is not None:
                logger.debug("cache hit for %s", url)
                return cached_payload

        try:
            response = requests.get(
                url,
                params=params,
                headers={"User-Agent": "sleeper-league-analytics"},
                timeout=self.timeout_seconds,
            )
            response.raise_for_status()
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else "?"
            error_body = exc.response.text if exc.response is not None else ""
            raise SleeperApiError(
                f"HTTP {status} for {url}: {error_body or exc}"
            ) from exc
        except requests.RequestException as exc:
            raise SleeperApiError(f"Request failed for {url}: {exc}") from exc

        if not response.text:
            raise SleeperApiError(f"Empty response for {url}")

        try:
            payload = response.json()
        except ValueError as exc:
            raise SleeperApiError(f"Invalid JSON from {url}") from exc

        if cache_path is not None:
            _write_cached_payload(cache_path, payload)
        return payload

    def _cache_path(
        self, path: str, params: Optional[Mapping[str, Any]]
    ) -> Optional[Path]:
        if self.cache_dir is None:
            return None
        normalized = {
            "base_url": self.base_url.rstrip("/"),
            "path": f"/{path.lstrip('/')}",
            "params": params or {},
        }
        key_json = json.dumps(normalized, sort_keys=True, separators=(",", ":"))
        digest = hashlib.sha256(key_json.encode("utf-8")).hexdigest()
        return Path(self.cache_dir) / f"{digest}.json"


def _read_cached_payload(cache_path: Path, ttl: timedelta) -> Optional[Any]:
    if not cache_path.exists():
        return None

    try:
        cached = json.loads(cache_path.read_text(encoding="utf-8"))
        fetched_dt = datetime.fromisoformat(cached["fetched_at"])
    except (OSError, ValueError, KeyError, TypeError):
        return None

    if fetched_dt.tzinfo is None:
        fetched_dt = fetched_dt.replace(tzinfo=timezone.utc)

    if datetime.now(timezone.utc) - fetched_dt >= ttl:
        return None

    return cached.get("payload")


def _write_cached_payload(cache_path: Path, payload: Any) -> None:
    try:
        cache_path.parent.mkdir(parents=True, exist_ok=True)
        cache_path.write_text(
            json.dumps(
                {
                    "fetched_at": datetime.now(timezone.utc).isoformat(),
                    "payload": payload,
                },
                ensure_ascii=True,
                separators=(",", ":"),
            ),
            encoding="utf-8",
        )
    except OSError:
        logger.warning("could not write Sleeper cache file %s", cache_path)
