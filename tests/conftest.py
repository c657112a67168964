import os
import threading

import django
import pytest
import requests

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "backend.routes_backend.settings")
django.setup()

from routing.osrm_client import OSRMClient
from routing.policy import RoutingPolicy

BASE_URL = "http://osrm.test"
SRC = "13.388860,52.517037"


class MockResponse:
    def __init__(self, status_code, payload=None, text=None):
        self.status_code = status_code
        self.payload = payload
        self.text = text

    def json(self):
        if self.text is not None:
            # same exception family requests raises for a bad body
            raise requests.exceptions.JSONDecodeError("Expecting value", self.text, 0)
        return self.payload


def ok(duration, distance):
    return MockResponse(200, {"code": "Ok", "routes": [{"duration": duration, "distance": distance}]})


class MockOSRMSession:
    """
    Stands in for requests.Session.
    Answers are scripted per destination: each GET pops the next one, the
    last answer repeats. An Exception instance in the script is raised.
    Unscripted destinations get HTTP 404.
    """
    def __init__(self, script=None, delay=0.0):
        self.script = {dst: list(answers) for dst, answers in (script or {}).items()}
        self.delay = delay
        self.calls = []
        self.in_flight = 0
        self.max_in_flight = 0
        self._lock = threading.Lock()

    def get(self, url, params=None, timeout=None):
        destination = url.rsplit(";", 1)[-1]
        with self._lock:
            self.calls.append((url, params, timeout))
            self.in_flight += 1
            self.max_in_flight = max(self.max_in_flight, self.in_flight)
            answers = self.script.get(destination)
            if answers:
                answer = answers.pop(0) if len(answers) > 1 else answers[0]
            else:
                answer = MockResponse(404, {"code": "NotFound"})
        try:
            if self.delay:
                threading.Event().wait(self.delay)
            if isinstance(answer, Exception):
                raise answer
            return answer
        finally:
            with self._lock:
                self.in_flight -= 1

    def calls_for(self, destination):
        return [call for call in self.calls if call[0].endswith(";" + destination)]


@pytest.fixture
def fast_policy():
    return RoutingPolicy(request_timeout_seconds=10, retry_attempts=5, retry_backoff_seconds=0.02)


@pytest.fixture
def make_client(fast_policy):
    def _make(script=None, policy=None, delay=0.0):
        session = MockOSRMSession(script, delay=delay)
        client = OSRMClient(base_url=BASE_URL, policy=policy or fast_policy, session=session)
        return client, session
    return _make
