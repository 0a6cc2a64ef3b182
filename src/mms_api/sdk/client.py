"""
MMS API v2 HTTP client.

Handles HTTP transport, content negotiation and error normalization.
Endpoint calls live in the sibling modules (sdk.accounts, sdk.rfids, etc.),
each one a single call to a verb primitive defined here.
"""

import threading
from concurrent.futures import Future, ThreadPoolExecutor
from http import HTTPStatus
from typing import Any, Dict, Optional, Type, TypeVar, Union

import requests

from mms_api.sdk.errors import ErrorDetail, MmsApiError, RequestCancelled
from mms_api.sdk.serialization import decode, encode, try_decode
from mms_api.sdk.types import API_KEY_HEADER, JSON_MEDIA_TYPE

T = TypeVar("T")

DEFAULT_TIMEOUT = 30.0
CHUNK_SIZE = 8192
# How often a cancellable call checks whether its response has arrived
CANCEL_POLL_INTERVAL = 0.05


class OwnedSession:
    """A session created by the client; closed together with the client."""

    def __init__(self, session: requests.Session):
        self.session = session

    def close(self) -> None:
        self.session.close()


class SharedSession:
    """A session supplied by the caller; the client never closes it."""

    def __init__(self, session: requests.Session):
        self.session = session

    def close(self) -> None:
        pass


Transport = Union[OwnedSession, SharedSession]


def _raise_if_cancelled(cancel: Optional[threading.Event]) -> None:
    if cancel is not None and cancel.is_set():
        raise RequestCancelled("Request cancelled by caller")


def _reason_phrase(response: requests.Response) -> str:
    if response.reason:
        return response.reason
    try:
        return HTTPStatus(response.status_code).phrase
    except ValueError:
        return ""


def _read_body(response: requests.Response, cancel: Optional[threading.Event]) -> bytes:
    """Read the streamed body, checking for cancellation between chunks."""
    chunks = []
    for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
        _raise_if_cancelled(cancel)
        chunks.append(chunk)
    _raise_if_cancelled(cancel)
    return b"".join(chunks)


def _close_abandoned(future: Future) -> None:
    """Release the connection of a response nobody is waiting for anymore."""
    if not future.cancelled() and future.exception() is None:
        future.result().close()


class MmsClient:
    """
    MMS API v2 request dispatcher.

    Every endpoint goes through one of the verb primitives below, and every
    response goes through `_process_response`. Non-2xx responses become
    MmsApiError; transport failures (connection errors, timeouts) propagate
    as the requests exception that occurred.

    Use `MmsClient.connect()` to let the client own its session, or
    `MmsClient.from_session()` to reuse a session you manage yourself.
    """

    def __init__(self, transport: Transport, api_url: str, timeout: float = DEFAULT_TIMEOUT):
        self._transport = transport
        self._api_url = api_url.rstrip("/")
        self._timeout = timeout
        # Runs requests that carry a cancel event, so the caller can stop waiting
        self._executor = ThreadPoolExecutor(thread_name_prefix="mms-api")

    @classmethod
    def connect(cls, api_key: str, api_url: str, timeout: float = DEFAULT_TIMEOUT) -> "MmsClient":
        """
        Create a client with its own session.

        Args:
            api_key: Partner API key, sent as the x-api-key header
            api_url: Base URL of the MMS API (without the api/v2 root)
            timeout: Per-request timeout in seconds

        Raises:
            ValueError: If api_key or api_url is empty
        """
        if not api_key:
            raise ValueError("api_key is required")
        if not api_url:
            raise ValueError("api_url is required")

        session = requests.Session()
        session.headers.update({
            "Accept": JSON_MEDIA_TYPE,
            API_KEY_HEADER: api_key,
        })
        return cls(OwnedSession(session), api_url, timeout)

    @classmethod
    def from_session(
        cls, session: requests.Session, api_url: str, timeout: float = DEFAULT_TIMEOUT
    ) -> "MmsClient":
        """Wrap a preconfigured session. The client will not close it."""
        if not api_url:
            raise ValueError("api_url is required")
        return cls(SharedSession(session), api_url, timeout)

    @property
    def api_url(self) -> str:
        return self._api_url

    @property
    def owns_session(self) -> bool:
        return isinstance(self._transport, OwnedSession)

    @property
    def _session(self) -> requests.Session:
        return self._transport.session

    # ── Verb primitives ──────────────────────────────────────────────────

    def fetch(self, path: str, result_type: Type[T], cancel: Optional[threading.Event] = None) -> T:
        return self._request("GET", path, result_type, cancel)

    def send(
        self,
        path: str,
        result_type: Type[T],
        body: Any = None,
        cancel: Optional[threading.Event] = None,
    ) -> T:
        return self._request("POST", path, result_type, cancel, **self._json_body(body))

    def send_void(self, path: str, body: Any = None, cancel: Optional[threading.Event] = None) -> None:
        self._request("POST", path, None, cancel, **self._json_body(body))

    def put(
        self,
        path: str,
        result_type: Type[T],
        body: Any,
        cancel: Optional[threading.Event] = None,
    ) -> T:
        return self._request("PUT", path, result_type, cancel, **self._json_body(body))

    def put_void(self, path: str, body: Any, cancel: Optional[threading.Event] = None) -> None:
        self._request("PUT", path, None, cancel, **self._json_body(body))

    def put_file(
        self,
        path: str,
        file_bytes: bytes,
        file_name: str,
        cancel: Optional[threading.Event] = None,
    ) -> None:
        self._request("PUT", path, None, cancel, files={"file": (file_name, file_bytes)})

    def remove(self, path: str, cancel: Optional[threading.Event] = None) -> None:
        self._request("DELETE", path, None, cancel)

    # ── Pipeline ─────────────────────────────────────────────────────────

    @staticmethod
    def _json_body(body: Any) -> Dict[str, Any]:
        return {
            "data": encode(body) if body is not None else b"",
            "headers": {"Content-Type": JSON_MEDIA_TYPE},
        }

    def _request(
        self,
        method: str,
        path: str,
        result_type: Optional[Type[T]],
        cancel: Optional[threading.Event],
        **kwargs: Any,
    ) -> Optional[T]:
        _raise_if_cancelled(cancel)

        url = f"{self._api_url}/{path.lstrip('/')}"
        with self._send(method, url, cancel, **kwargs) as response:
            return self._process_response(response, result_type, cancel)

    def _send(
        self,
        method: str,
        url: str,
        cancel: Optional[threading.Event],
        **kwargs: Any,
    ) -> requests.Response:
        """
        Issue the request and return once the response headers arrive.

        With a cancel event the request runs on a worker thread while this
        thread waits on both. Setting the event raises RequestCancelled at
        once; a response that arrives later is closed.
        """
        if cancel is None:
            return self._session.request(method, url, stream=True, timeout=self._timeout, **kwargs)

        future = self._executor.submit(
            self._session.request, method, url, stream=True, timeout=self._timeout, **kwargs
        )
        while not future.done():
            if cancel.wait(CANCEL_POLL_INTERVAL):
                future.add_done_callback(_close_abandoned)
                raise RequestCancelled("Request cancelled by caller")
        return future.result()

    def _process_response(
        self,
        response: requests.Response,
        result_type: Optional[Type[T]],
        cancel: Optional[threading.Event],
    ) -> Optional[T]:
        """
        Turn a response into a decoded value, None, or an MmsApiError.

        Raises:
            MmsApiError: On any non-2xx status
            DecodeError: If a 2xx body does not decode as `result_type`
            RequestCancelled: If `cancel` is set while the body is read
        """
        content = _read_body(response, cancel)
        status = response.status_code

        if 200 <= status < 300:
            if result_type is None:
                return None
            return decode(result_type, content)

        message = content.decode("utf-8", errors="replace") if content else _reason_phrase(response)

        outcome = try_decode(ErrorDetail, content)
        if outcome.ok:
            raise MmsApiError(status, message, detail=outcome.value)
        raise MmsApiError(status, message, cause=outcome.error) from outcome.error

    # ── Lifecycle ────────────────────────────────────────────────────────

    def close(self) -> None:
        """Release the session if this client owns it."""
        self._executor.shutdown(wait=False)
        self._transport.close()

    def __enter__(self) -> "MmsClient":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()
