from __future__ import annotations

import requests

USER_AGENT = "cloudwatcher/0.1"


class NetworkError(ConnectionError):
    pass


class HttpFetcher:
    """Blocking ``fetch(url) -> body`` over HTTP."""

    def __init__(self, timeout: float = 10.0, session: requests.Session | None = None) -> None:
        self.timeout = timeout
        self.session = session

    def __call__(self, url: str) -> str:
        return self.fetch(url)

    def fetch(self, url: str) -> str:
        getter = self.session.get if self.session is not None else requests.get
        try:
            resp = getter(url, headers={"User-Agent": USER_AGENT}, timeout=self.timeout)
        except requests.RequestException as exc:
            raise NetworkError(f"Could not read data from Cloudwatcher at {url}: {exc}") from exc
        if not 200 <= resp.status_code < 300:
            raise NetworkError(f"Cloudwatcher at {url} answered {resp.status_code}: {resp.text}")
        return resp.text
