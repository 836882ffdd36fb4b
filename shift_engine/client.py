"""Schedule payload loading.

Tries the schedule server first and caches what it returns; when the server is
unset or unreachable, falls back to the cached payload and then to a bundled
fallback file. One attempt per location, no retries.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional, Union

import httpx


logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def fetch_combined_schedule(
    server_url: str,
    timeout_s: float = 20.0,
    transport: Optional[httpx.BaseTransport] = None,
) -> Any:
    """GET ``{server_url}/combined_schedule`` and return the decoded JSON.

    Raises httpx.HTTPError on transport or status errors and ValueError when
    the body is not JSON.
    """
    url = f"{server_url.rstrip('/')}/combined_schedule"
    with httpx.Client(timeout=timeout_s, follow_redirects=True, transport=transport) as client:
        resp = client.get(url, headers={"Cache-Control": "no-store"})
        resp.raise_for_status()
        return resp.json()


def read_payload(path: PathLike) -> Optional[Any]:
    """Read a JSON payload from disk; None if missing or unreadable."""
    p = Path(path).expanduser()
    if not p.exists():
        return None
    try:
        return json.loads(p.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        logger.warning("Could not read payload from %s: %s", p, exc)
        return None


def write_payload(payload: Any, path: PathLike) -> Path:
    p = Path(path).expanduser().resolve()
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(json.dumps(payload, ensure_ascii=False), encoding="utf-8")
    return p


def load_schedule(
    server_url: str = "",
    cache_path: Optional[PathLike] = None,
    fallback_path: Optional[PathLike] = None,
    timeout_s: float = 20.0,
    transport: Optional[httpx.BaseTransport] = None,
) -> Optional[Any]:
    """Return the freshest payload available, or None when there is none."""
    if server_url.startswith("http"):
        try:
            payload = fetch_combined_schedule(server_url, timeout_s=timeout_s, transport=transport)
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("Could not fetch from server (%s): %s", server_url, exc)
        else:
            if cache_path is not None:
                try:
                    write_payload(payload, cache_path)
                except OSError as exc:
                    logger.warning("Could not cache schedule to %s: %s", cache_path, exc)
            logger.info("Loaded schedule from %s", server_url)
            return payload

    for label, path in (("cached", cache_path), ("fallback", fallback_path)):
        if path is None:
            continue
        payload = read_payload(path)
        if payload is not None:
            logger.info("Loaded %s schedule from %s", label, path)
            return payload

    logger.warning("No schedule found")
    return None
