from .loop import loop, loop_async
from .take import skip, skip_async, take, take_async

__all__ = (
    # Sync sequences
    "loop",
    "skip",
    "take",
    # Async sequences
    "loop_async",
    "skip_async",
    "take_async",
)
