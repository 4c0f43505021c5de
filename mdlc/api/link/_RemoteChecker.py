"""HTTP existence check for remote targets (private)."""

from __future__ import annotations

import threading
import time
from collections.abc import Callable

import requests

from ..config.CheckConfig import CheckConfig
from ._constants import HEAD_FALLBACK_STATUS, REASON_TIMED_OUT
from .http_retry import TRANSIENT_EXCEPTIONS, RetryCancelled, http_retry
from .LinkStatus import LinkStatus


def _describe(exc: BaseException) -> str:
    message = str(exc).strip()
    return message if message else type(exc).__name__


class _RemoteChecker:
    """HEAD a URL (falling back to a streamed GET) with retries on transient failures.

    One requests session per worker thread; each attempt's timeout is capped
    by what is left of the run budget.
    """

    def __init__(
        self,
        config: CheckConfig,
        cancel_event: threading.Event | None = None,
        deadline: float | None = None,
        session_factory: Callable[[], requests.Session] = requests.Session,
    ):
        self.config = config
        self.cancel_event = cancel_event if cancel_event is not None else threading.Event()
        self.deadline = deadline
        self._session_factory = session_factory
        self._local = threading.local()
        self._lock = threading.Lock()
        self._sessions: list[requests.Session] = []

    def _session(self) -> requests.Session:
        session = getattr(self._local, "session", None)
        if session is None:
            session = self._session_factory()
            session.headers["User-Agent"] = self.config.user_agent
            self._local.session = session
            with self._lock:
                self._sessions.append(session)
        return session

    def close(self) -> None:
        with self._lock:
            sessions, self._sessions = self._sessions, []
        for session in sessions:
            session.close()

    def _attempt_timeout(self) -> float:
        timeout = self.config.timeout_secs
        if self.deadline is not None:
            remaining = self.deadline - time.monotonic()
            if remaining <= 0:
                raise RetryCancelled("run budget exhausted")
            timeout = min(timeout, remaining)
        return timeout

    def _request_status(self, url: str) -> int:
        session = self._session()
        response = session.head(url, timeout=self._attempt_timeout(), allow_redirects=True)
        try:
            status = response.status_code
        finally:
            response.close()

        if status in HEAD_FALLBACK_STATUS:
            # Body is never read: stream=True stops after the headers
            response = session.get(url, timeout=self._attempt_timeout(), allow_redirects=True, stream=True)
            try:
                status = response.status_code
            finally:
                response.close()
        return status

    def check(self, url: str) -> LinkStatus:
        """Check one URL.

        Returns:
            valid for 2xx/3xx, broken("http status N") for anything else,
            broken("network error: ...") once retries are exhausted, and
            broken("timed out") when the run is cancelled first
        """
        request = http_retry(
            max_attempts=self.config.retries + 1,
            delay_secs=self.config.backoff_secs,
            cancel_event=self.cancel_event,
        )(self._request_status)

        try:
            status = request(url)
        except RetryCancelled:
            return LinkStatus.broken(REASON_TIMED_OUT)
        except TRANSIENT_EXCEPTIONS as exc:
            if self.cancel_event.is_set():
                return LinkStatus.broken(REASON_TIMED_OUT)
            return LinkStatus.broken(f"network error: {_describe(exc)}")
        except (requests.RequestException, ValueError) as exc:
            # Invalid URL, too many redirects: retrying cannot help
            return LinkStatus.broken(f"network error: {_describe(exc)}")

        if 200 <= status < 400:
            return LinkStatus.valid()
        return LinkStatus.broken(f"http status {status}")
