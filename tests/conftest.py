import json
import pathlib
import sys
from typing import Any, Dict, List, Optional, Tuple

import pytest

ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


class StubResponse:
    def __init__(self, text: str) -> None:
        self.text = text


class StubTransport:
    """Records every call and replies with a fixed or per-call body."""

    def __init__(self, body: Any = None, text: Optional[str] = None) -> None:
        if text is None:
            text = json.dumps(body) if body is not None else ""
        self._text = text
        self.calls: List[Tuple[str, Dict[str, Any]]] = []

    def __call__(self, url: str, options: Dict[str, Any]) -> StubResponse:
        self.calls.append((url, options))
        return StubResponse(self._text)

    @property
    def last_query(self) -> str:
        return json.loads(self.calls[-1][1]["body"])["query"]


class DictStore:
    def __init__(self) -> None:
        self.values: Dict[str, str] = {}
        self.puts: List[Tuple[str, str, int]] = []

    def get(self, key: str) -> Optional[str]:
        return self.values.get(key)

    def put(self, key: str, value: str, ttl_seconds: int) -> None:
        self.puts.append((key, value, ttl_seconds))
        self.values[key] = value


LATEST_BODY = {
    "data": {
        "latest": [
            {"date": "2020-01-01", "baseCurrency": "EUR", "quoteCurrency": "USD", "quote": 1.1},
            {"date": "2020-01-01", "baseCurrency": "EUR", "quoteCurrency": "GBP", "quote": 0.9},
        ]
    }
}


@pytest.fixture
def store() -> DictStore:
    return DictStore()


@pytest.fixture
def transport() -> StubTransport:
    return StubTransport(LATEST_BODY)
