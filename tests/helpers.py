"""Test helpers shared by the test modules."""

import re
from typing import List, Optional, Tuple

import httpx

ENGINE_URL = "http://localhost:8080/engine-rest"


class EngineStub:
    """Fake engine endpoint recording every request it receives."""

    def __init__(self, response: Optional[httpx.Response] = None):
        self.response = response or httpx.Response(200, json={"id": "deployment-1"})
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.response

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)

    @property
    def last_request(self) -> httpx.Request:
        assert self.requests, "engine received no request"
        return self.requests[-1]


def parse_multipart(request: httpx.Request) -> List[Tuple[str, Optional[str], bytes]]:
    """Split a multipart request into (name, filename, body) parts."""
    boundary = request.headers["content-type"].split("boundary=")[1].encode()
    parts = []

    for chunk in request.content.split(b"--" + boundary):
        if chunk.startswith(b"\r\n"):
            chunk = chunk[2:]
        if chunk.endswith(b"\r\n"):
            chunk = chunk[:-2]
        if not chunk or chunk == b"--":
            continue

        headers, body = chunk.split(b"\r\n\r\n", 1)
        headers = headers.decode()
        name = re.search(r'form-data; name="([^"]*)"', headers).group(1)
        filename = re.search(r'filename="([^"]*)"', headers)
        parts.append((name, filename.group(1) if filename else None, body))

    return parts
