"""Hand-written HTTP and fetcher doubles shared by the tests."""

import threading
import time

import requests
from requests.structures import CaseInsensitiveDict


class FakeResponse:
    def __init__(self, status_code=200, body=b"", headers=None) -> None:
        self.status_code = status_code
        self.headers = CaseInsensitiveDict(headers or {})
        self.content = body
        self.closed = False

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.closed = True


class FakeSession:
    """Serve canned responses keyed by URL, recording every request."""

    def __init__(self, responses) -> None:
        self.responses = responses
        self.calls = []
        self.closed = False

    def get(self, url, **kwargs):
        self.calls.append((url, kwargs))
        response = self.responses[url]
        if isinstance(response, Exception):
            raise response
        return response

    def close(self):
        self.closed = True


class FakeFetcher:
    """Return manifest bodies by URL; exceptions in the map are raised.

    Tracks the peak number of fetches running at the same time.
    """

    def __init__(self, bodies, gate=None, delay=0.0) -> None:
        self.bodies = bodies
        self.gate = gate
        self.delay = delay
        self.fetched = []
        self.active = 0
        self.peak = 0
        self._lock = threading.Lock()

    def fetch(self, url):
        with self._lock:
            self.active += 1
            self.peak = max(self.peak, self.active)
        try:
            if self.gate is not None:
                self.gate.wait(timeout=5)
            if self.delay:
                time.sleep(self.delay)
            with self._lock:
                self.fetched.append(url)
            body = self.bodies[url]
            if isinstance(body, Exception):
                raise body
            return body
        finally:
            with self._lock:
                self.active -= 1
