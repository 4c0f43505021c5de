"""Concurrent scheduling of link checks with deterministic aggregation."""

from __future__ import annotations

import logging
import queue
import threading
import time
from collections.abc import Callable, Iterable
from concurrent.futures import ThreadPoolExecutor
from functools import partial
from pathlib import Path

import requests

from ..config.CheckConfig import CheckConfig
from ._AnchorRegistry import _AnchorRegistry
from ._constants import REASON_TIMED_OUT
from ._HostThrottle import _HostThrottle
from ._RemoteChecker import _RemoteChecker
from ._Resolver import _Resolver
from .classify_target import classify_target
from .LinkOccurrence import LinkOccurrence
from .LinkStatus import LinkStatus
from .RemoteUrl import RemoteUrl
from .TargetKind import TargetKind
from .ValidationResult import ValidationResult

logger = logging.getLogger(__name__)


class Coordinator:
    """Run the resolver over many occurrences with bounded concurrency.

    - ``config.workers`` threads bound every in-flight check.
    - Remote checks are additionally capped per host (``config.per_host_limit``).
    - Workers push results into a queue; the calling thread is the only
      aggregator and places each result by occurrence index, so the returned
      list is in extraction order whatever the completion order.
    - With ``config.run_timeout_secs`` set, occurrences still unresolved when
      the budget runs out are reported as broken("timed out").
    """

    def __init__(
        self,
        config: CheckConfig,
        project_root: Path | None = None,
        markdown_extensions: Iterable[str] = (".md", ".markdown"),
        anchors: _AnchorRegistry | None = None,
        session_factory: Callable[[], requests.Session] = requests.Session,
    ):
        self.config = config
        if config.project_root is not None:
            project_root = Path(config.project_root)
        self.project_root = project_root
        self.markdown_extensions = tuple(markdown_extensions)
        self.anchors = anchors if anchors is not None else _AnchorRegistry()
        self._session_factory = session_factory

    def classify(self, occurrence: LinkOccurrence) -> TargetKind:
        return classify_target(
            occurrence.raw_target,
            occurrence.source_file,
            project_root=self.project_root,
            ignored_schemes=self.config.ignored_schemes,
        )

    def run(
        self,
        occurrences: Iterable[LinkOccurrence],
        on_result: Callable[[ValidationResult], None] | None = None,
    ) -> list[ValidationResult]:
        """Check every occurrence.

        Args:
            occurrences: Occurrences in extraction order
            on_result: Called from the calling thread as each result arrives

        Returns:
            Exactly one ValidationResult per occurrence, in the order given
        """
        occurrences = list(occurrences)
        kinds = [self.classify(occurrence) for occurrence in occurrences]
        total = len(occurrences)
        results: list[ValidationResult | None] = [None] * total

        cancel_event = threading.Event()
        deadline = None
        if self.config.run_timeout_secs is not None:
            deadline = time.monotonic() + self.config.run_timeout_secs

        remote = _RemoteChecker(self.config, cancel_event, deadline, self._session_factory)
        resolver = _Resolver(self.config, self.anchors, remote, self.markdown_extensions)
        sink: queue.Queue[tuple[int, ValidationResult]] = queue.Queue()
        executor = ThreadPoolExecutor(max_workers=self.config.workers, thread_name_prefix="mdlc-check")
        throttle = _HostThrottle(executor, self.config.per_host_limit)

        collected = 0

        def record(index: int, result: ValidationResult) -> None:
            nonlocal collected
            results[index] = result
            collected += 1
            if on_result is not None:
                on_result(result)

        try:
            for index, (occurrence, kind) in enumerate(zip(occurrences, kinds)):
                task = partial(self._check, resolver, sink, cancel_event, index, occurrence, kind)
                if isinstance(kind, RemoteUrl) and self.config.check_remote:
                    throttle.submit(kind.host, task)
                else:
                    executor.submit(task)

            while collected < total:
                timeout = None if deadline is None else deadline - time.monotonic()
                if timeout is not None and timeout <= 0:
                    break
                try:
                    record(*sink.get(timeout=timeout))
                except queue.Empty:
                    break

            # Checks that finished before the deadline keep their result
            while collected < total:
                try:
                    record(*sink.get_nowait())
                except queue.Empty:
                    break
        except KeyboardInterrupt:
            cancel_event.set()
            throttle.close()
            executor.shutdown(wait=False, cancel_futures=True)
            self._close_in_background(executor, remote)
            raise

        timed_out = collected < total
        if timed_out:
            logger.warning("Run budget exhausted: %d of %d checks unresolved", total - collected, total)
            cancel_event.set()
        throttle.close()
        if timed_out:
            executor.shutdown(wait=False, cancel_futures=True)
            self._close_in_background(executor, remote)
        else:
            executor.shutdown(wait=True)
            remote.close()

        final: list[ValidationResult] = []
        for index, result in enumerate(results):
            if result is None:
                result = ValidationResult(occurrences[index], LinkStatus.broken(REASON_TIMED_OUT), kinds[index])
                if on_result is not None:
                    on_result(result)
            final.append(result)
        logger.info(
            "Checked %d links: %d broken", total, sum(1 for result in final if result.status.is_broken)
        )
        return final

    @staticmethod
    def _close_in_background(executor: ThreadPoolExecutor, remote: _RemoteChecker) -> threading.Thread:
        """Close the HTTP sessions once checks still in flight have returned."""

        def close() -> None:
            executor.shutdown(wait=True)
            remote.close()

        thread = threading.Thread(target=close, name="mdlc-cleanup", daemon=True)
        thread.start()
        return thread

    @staticmethod
    def _check(
        resolver: _Resolver,
        sink: queue.Queue[tuple[int, ValidationResult]],
        cancel_event: threading.Event,
        index: int,
        occurrence: LinkOccurrence,
        kind: TargetKind,
    ) -> None:
        if cancel_event.is_set():
            status = LinkStatus.broken(REASON_TIMED_OUT)
        else:
            try:
                status = resolver.resolve(kind, occurrence.source_file)
            except Exception as exc:  # noqa: BLE001
                logger.exception("Check failed for %s", occurrence.location())
                status = LinkStatus.broken(f"check failed: {exc}")
        sink.put((index, ValidationResult(occurrence, status, kind)))
