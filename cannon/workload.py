"""Concurrent client workload.

WorkloadGenerator runs a fixed pool of client threads, each sending
requests back to back through a routing strategy. There is no queue and
no backpressure: the offered load is always "as fast as the servers
answer", which is what the throughput reporter measures.

Client threads are daemons, so the process can exit while they are
sleeping inside a request. ``stop()`` is an optional orderly shutdown.
"""

from __future__ import annotations

import logging
import threading

from cannon.components.strategies import RoutingStrategy

logger = logging.getLogger(__name__)

DEFAULT_NUM_WORKERS = 8


class WorkloadGenerator:
    """Pool of client threads hammering a routing strategy.

    Each worker ``i`` calls ``strategy.request(worker_id=i)`` in a loop,
    so the worker index is the stable identity used for affinity routing.

    Args:
        strategy: Routes every request to a server.
        num_workers: Number of concurrent client threads.
        name: Prefix for worker thread names.
    """

    def __init__(
        self,
        strategy: RoutingStrategy,
        num_workers: int = DEFAULT_NUM_WORKERS,
        name: str = "client",
    ):
        if num_workers <= 0:
            raise ValueError(f"num_workers must be positive, got {num_workers}")

        self._strategy = strategy
        self._num_workers = num_workers
        self._name = name
        self._stop = threading.Event()
        self._threads: list[threading.Thread] = []

    @property
    def num_workers(self) -> int:
        return self._num_workers

    @property
    def threads(self) -> list[threading.Thread]:
        return list(self._threads)

    @property
    def is_running(self) -> bool:
        return any(t.is_alive() for t in self._threads)

    def _run_worker(self, worker_id: int) -> None:
        while not self._stop.is_set():
            self._strategy.request(worker_id=worker_id, interrupt=self._stop)

    def start(self) -> None:
        """Start all client threads. Calling start twice is an error."""
        if self._threads:
            raise RuntimeError("WorkloadGenerator already started")

        self._threads = [
            threading.Thread(
                target=self._run_worker,
                args=(i,),
                name=f"{self._name}-{i}",
                daemon=True,
            )
            for i in range(self._num_workers)
        ]

        logger.info("Starting %d client threads", len(self._threads))
        for thread in self._threads:
            thread.start()

    def stop(self, timeout: float | None = None) -> None:
        """Signal every worker to finish and wait for them.

        In-flight requests are interrupted; their elapsed time is still
        recorded.
        """
        self._stop.set()
        self.join(timeout)

    def join(self, timeout: float | None = None) -> None:
        for thread in self._threads:
            thread.join(timeout)
