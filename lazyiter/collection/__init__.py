from .enumerate import enumerate, enumerate_async, intersperse, intersperse_async
from .flatten import flat_map, flat_map_async, flatten, flatten_async
from .zip import zip, zip_async, zip_with, zip_with_async

__all__ = (
    # Sync sequences
    "enumerate",
    "flat_map",
    "flatten",
    "intersperse",
    "zip",
    "zip_with",
    # Async sequences
    "enumerate_async",
    "flat_map_async",
    "flatten_async",
    "intersperse_async",
    "zip_async",
    "zip_with_async",
)
