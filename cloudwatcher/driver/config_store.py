from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Optional

ADDRESS_KEY = "address"


class AddressStore:
    """
    Persists the Cloudwatcher address as a small JSON document.

    A missing or empty file means no address has been configured yet.
    """

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path).expanduser()

    def _read(self) -> dict:
        if not self.path.exists():
            return {}
        with open(self.path, "r", encoding="utf-8") as f:
            data = f.read()
        if not data.strip():
            return {}
        try:
            content = json.loads(data)
        except json.JSONDecodeError as exc:
            raise ValueError(f"Config file {self.path} is not valid JSON: {exc}") from exc
        return content if isinstance(content, dict) else {}

    def load(self) -> Optional[str]:
        address = self._read().get(ADDRESS_KEY)
        return address or None

    def save(self, address: str) -> None:
        data = self._read()
        data[ADDRESS_KEY] = address
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            f.write(json.dumps(data, indent=2))
