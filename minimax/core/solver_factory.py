"""
Solver Strategy Registry

Maps a configured strategy name to the class that builds it, so callers
never branch on which search is in use.
"""

import logging
from abc import ABC, abstractmethod

from .ai import AI
from .enums import Player
from .settings import SolverSettings
from .solver import Solver
from .streaming import StreamingAI

logger = logging.getLogger(__name__)


class SolverProvider(ABC):
    """Abstract base class for solver builders"""

    @abstractmethod
    def build(self, player: Player, depth: int) -> Solver:
        """Build and return a configured solver"""
        pass


class TreeProvider(SolverProvider):
    def build(self, player: Player, depth: int) -> Solver:
        return AI(player, depth)


class StreamingProvider(SolverProvider):
    """
    Evaluate-and-discard search.
    Use this one when the depth makes a fully built tree too large to hold.
    """
    def build(self, player: Player, depth: int) -> Solver:
        return StreamingAI(player, depth)


# Provider Registry
PROVIDERS = {
    "tree": TreeProvider(),
    "streaming": StreamingProvider(),
}


def get_solver(settings: SolverSettings) -> Solver:
    """
    Factory function to return the configured solver using the provider strategy.
    """
    provider = PROVIDERS.get(settings.strategy)
    if not provider:
        raise ValueError(f"Unsupported solver strategy: {settings.strategy}")

    logger.info("Using %s solver for player %s at depth %s",
                settings.strategy, int(settings.player), settings.depth)
    return provider.build(settings.player, settings.depth)
