"""CPU engine package: random one-ply search and the Qt worker bridge.

The Qt bridge is imported lazily so that the console and the core game
layer do not need a Qt installation at import time.
"""

from chessdev.engine.random_search import RandomMoveEngine
from chessdev.engine.search import IEngine, SearchResult

DefaultEngine: type[IEngine] = RandomMoveEngine

__all__ = [
    "DefaultEngine",
    "IEngine",
    "RandomMoveEngine",
    "SearchResult",
]
