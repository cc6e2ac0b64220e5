from typing import Callable

import httpx


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it served."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)


def json_client(status_code: int, json_data: object) -> tuple[httpx.AsyncClient, RecordingTransport]:
    transport = RecordingTransport(lambda request: httpx.Response(status_code, json=json_data))
    return httpx.AsyncClient(transport=transport), transport


def text_client(status_code: int, text: str) -> tuple[httpx.AsyncClient, RecordingTransport]:
    transport = RecordingTransport(lambda request: httpx.Response(status_code, text=text))
    return httpx.AsyncClient(transport=transport), transport


def raising_client(exc: Exception) -> tuple[httpx.AsyncClient, RecordingTransport]:
    def _raise(request: httpx.Request) -> httpx.Response:
        raise exc

    transport = RecordingTransport(_raise)
    return httpx.AsyncClient(transport=transport), transport
