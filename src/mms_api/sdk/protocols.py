"""Dispatcher protocol definitions."""

import threading
from typing import Any, Optional, Protocol, Type, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class Dispatcher(Protocol):
    """
    Verb primitives every endpoint function is built from.

    `path` is relative to the API base URL and already carries its query
    string. `cancel` is an optional event; setting it aborts the call with
    RequestCancelled.
    """

    def fetch(self, path: str, result_type: Type[T], cancel: Optional[threading.Event] = None) -> T:
        """GET `path` and decode the body as `result_type`."""
        ...

    def send(
        self,
        path: str,
        result_type: Type[T],
        body: Any = None,
        cancel: Optional[threading.Event] = None,
    ) -> T:
        """POST `body` (or an empty body) and decode the response."""
        ...

    def send_void(self, path: str, body: Any = None, cancel: Optional[threading.Event] = None) -> None:
        """POST `body` (or an empty body), discarding the response."""
        ...

    def put(
        self,
        path: str,
        result_type: Type[T],
        body: Any,
        cancel: Optional[threading.Event] = None,
    ) -> T:
        """PUT `body` and decode the response."""
        ...

    def put_void(self, path: str, body: Any, cancel: Optional[threading.Event] = None) -> None:
        """PUT `body`, discarding the response."""
        ...

    def put_file(
        self,
        path: str,
        file_bytes: bytes,
        file_name: str,
        cancel: Optional[threading.Event] = None,
    ) -> None:
        """PUT raw bytes as a multipart `file` part."""
        ...

    def remove(self, path: str, cancel: Optional[threading.Event] = None) -> None:
        """DELETE `path`, discarding the response."""
        ...
