"""Minimal stand-in for aiohttp.ClientSession used by adapter tests."""
import json
from typing import Any, Dict, List, Optional


class FakeResponse:

    def __init__(self, status: int = 200, body: Any = None, reason: str = "OK"):
        self.status = status
        self.reason = reason
        self._text = body if isinstance(body, str) else ("" if body is None else json.dumps(body))

    async def text(self) -> str:
        return self._text

    async def json(self, content_type: Optional[str] = "application/json") -> Any:
        return json.loads(self._text)

    async def __aenter__(self) -> "FakeResponse":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        return None


class FakeSession:
    """Returns queued responses, or raises queued exceptions, in order."""

    def __init__(self, *responses: Any):
        self.responses: List[Any] = list(responses)
        self.requests: List[Dict[str, Any]] = []
        self.closed = False

    def request(self, method: str, url: str, params=None, json=None, headers=None):
        self.requests.append({"method": method, "url": url, "params": params, "json": json, "headers": headers})
        item = self.responses.pop(0)
        if isinstance(item, BaseException):
            raise item
        return item

    def post(self, url: str, json=None, headers=None):
        return self.request("POST", url, json=json, headers=headers)

    async def close(self) -> None:
        self.closed = True
