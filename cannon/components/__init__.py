"""Servers and the strategies that route requests to them."""

from cannon.components.server import Server
from cannon.components.strategies import (
    AffinityStrategy,
    RandomStrategy,
    RoutingStrategy,
    strategy_from_name,
)

__all__ = [
    "AffinityStrategy",
    "RandomStrategy",
    "RoutingStrategy",
    "Server",
    "strategy_from_name",
]
