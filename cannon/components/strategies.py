"""Routing strategies: which server handles a client's next request.

Strategies:
- RandomStrategy: uniform random choice per request.
- AffinityStrategy: each client worker is pinned to one server by hashing
  its identity.

Both hold an immutable tuple of servers fixed at construction.
"""

from __future__ import annotations

import hashlib
import logging
import math
import random
import struct
import threading
from abc import ABC, abstractmethod
from typing import Hashable, Sequence

from cannon.components.server import Server

logger = logging.getLogger(__name__)


class RoutingStrategy(ABC):
    """Routes each request to exactly one server.

    Args:
        servers: Non-empty sequence of servers. Copied into a tuple.

    Raises:
        ValueError: If ``servers`` is empty.
    """

    def __init__(self, servers: Sequence[Server]):
        if not servers:
            raise ValueError("servers must not be empty")
        self._servers: tuple[Server, ...] = tuple(servers)

    @property
    def servers(self) -> tuple[Server, ...]:
        return self._servers

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable strategy name."""
        ...

    @abstractmethod
    def select(self, worker_id: Hashable | None = None) -> int:
        """Return the index of the server for the next request.

        Always satisfies ``0 <= index < len(self.servers)``.
        """
        ...

    def request(
        self,
        worker_id: Hashable | None = None,
        interrupt: threading.Event | None = None,
    ) -> None:
        """Send one request to the selected server and wait for it."""
        self._servers[self.select(worker_id)].request(interrupt)


class RandomStrategy(RoutingStrategy):
    """Naively pick a random server for every request.

    The generator is shared by all client threads, so draws are serialized
    with a lock.

    Args:
        servers: Servers to route across.
        seed: Random seed for reproducibility.
    """

    def __init__(self, servers: Sequence[Server], seed: int | None = None):
        super().__init__(servers)
        self._rng = random.Random(seed)
        self._lock = threading.Lock()

    @property
    def name(self) -> str:
        return "random"

    def select(self, worker_id: Hashable | None = None) -> int:
        with self._lock:
            u = self._rng.random()
        n = len(self._servers)
        return min(math.floor(u * n), n - 1)


def _worker_hash(worker_id: int) -> int:
    """Signed 32-bit hash of a worker identity."""
    digest = hashlib.blake2b(struct.pack(">q", worker_id), digest_size=8).digest()
    return struct.unpack(">i", digest[:4])[0]


class AffinityStrategy(RoutingStrategy):
    """Consistently send a worker's requests to the same server.

    The server index is ``abs(hash(worker)) % len(servers)``. Without an
    explicit ``worker_id`` the calling thread's identifier is used, which
    is stable for the life of the thread.

    Integer identities are hashed directly; any other hashable identity is
    first reduced to a stable integer from its repr.
    """

    @property
    def name(self) -> str:
        return "affinity"

    def select(self, worker_id: Hashable | None = None) -> int:
        if worker_id is None:
            worker_id = threading.get_ident()
        if not isinstance(worker_id, int):
            worker_id = int.from_bytes(
                hashlib.blake2b(repr(worker_id).encode("utf-8"), digest_size=8).digest(),
                "big",
                signed=True,
            )
        else:
            # Thread idents can exceed 63 bits; fold into the signed 64-bit range.
            worker_id = (worker_id + 2**63) % 2**64 - 2**63
        return abs(_worker_hash(worker_id)) % len(self._servers)


def strategy_from_name(name: str, servers: Sequence[Server]) -> RoutingStrategy:
    """Build the strategy named on the command line.

    ``"random"`` (any case) selects RandomStrategy. Every other name,
    including typos, falls back to AffinityStrategy.
    """
    strategy: RoutingStrategy
    if name.lower() == "random":
        strategy = RandomStrategy(servers)
    else:
        if name.lower() != "affinity":
            logger.warning("Unrecognized strategy %r, falling back to affinity", name)
        strategy = AffinityStrategy(servers)

    logger.info("Using %s strategy", strategy.name)
    return strategy
