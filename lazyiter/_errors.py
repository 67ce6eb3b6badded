from __future__ import annotations

class InvalidSourceError(TypeError):
    """Value does not implement the iteration protocol a handle needs."""

    source: object
    kind: str

    def __init__(self, source: object, kind: str) -> None:
        self.source = source
        self.kind = kind
        super().__init__(f"{source!r} is not {kind} iterable")

class EmptySequenceError(Exception):
    """try_first found no element."""

    def __init__(self) -> None:
        super().__init__("Sequence yielded no elements")

class IndexOutOfRangeError(Exception):
    """try_nth asked for a position the sequence does not reach."""

    index: int

    def __init__(self, index: int) -> None:
        self.index = index
        super().__init__(f"Sequence has no element at index {index}")

__all__ = ("EmptySequenceError", "IndexOutOfRangeError", "InvalidSourceError")
