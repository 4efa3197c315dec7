# bluetraffic/util/sources.py
from __future__ import annotations

import json
import urllib.error
import urllib.request
from pathlib import Path
from typing import Any, Dict

from bluetraffic.errors import DataLoadError

USER_AGENT = "bluetraffic/1.0"


def is_url(source: str | Path) -> bool:
    return str(source).startswith(("http://", "https://"))


def _http_get_text(url: str, timeout: int = 30) -> str:
    req = urllib.request.Request(
        url,
        headers={
            "User-Agent": USER_AGENT,
            "Accept": "application/json, text/csv, */*",
        },
    )

    try:
        with urllib.request.urlopen(req, timeout=timeout) as resp:
            return resp.read().decode("utf-8", errors="replace")
    except urllib.error.HTTPError as e:
        raise DataLoadError(f"GET {url} failed: HTTP {e.code} {e.reason}") from e
    except (urllib.error.URLError, OSError) as e:
        raise DataLoadError(f"GET {url} failed: {e}") from e


def fetch_json(source: str | Path, timeout: int = 30) -> Dict[str, Any]:
    """
    Load a JSON document from a local path or an http(s) URL.
    """
    if is_url(source):
        raw = _http_get_text(str(source), timeout=timeout)
    else:
        try:
            raw = Path(source).read_text(encoding="utf-8")
        except OSError as e:
            raise DataLoadError(f"cannot read {source}: {e}") from e

    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        raise DataLoadError(f"{source} is not valid JSON: {e}") from e
