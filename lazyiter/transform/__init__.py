from .effects import use, use_async
from .map import filter, filter_async, map, map_async

__all__ = (
    # Sync sequences
    "filter",
    "map",
    "use",
    # Async sequences
    "filter_async",
    "map_async",
    "use_async",
)
