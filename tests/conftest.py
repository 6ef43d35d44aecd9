import json
from dataclasses import dataclass, field

import pytest
import requests


def make_response(status_code: int) -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    return response


@dataclass
class RecordingPost:
    """Stands in for ``requests.post``; records calls and replays a status or error."""
    status_code: int = 204
    error: Exception | None = None
    calls: list[dict] = field(default_factory=list)

    def __call__(self, url, data=None, headers=None, timeout=None, **kwargs):
        self.calls.append({"url": url, "data": data, "headers": headers, "timeout": timeout})
        if self.error is not None:
            raise self.error
        return make_response(self.status_code)

    @property
    def last_body(self) -> dict:
        return json.loads(self.calls[-1]["data"].decode("utf-8"))


@pytest.fixture
def fake_post(monkeypatch: pytest.MonkeyPatch) -> RecordingPost:
    recorder = RecordingPost()
    monkeypatch.setattr(requests, "post", recorder)
    return recorder
