"""Errors raised by the disjoint-set forest."""


class OutOfRangeError(IndexError):
    """Raised when an element index falls outside ``[0, size)``.

    Attributes:
        index: The offending index as passed by the caller.
        size: Number of elements in the forest.
    """

    def __init__(self, index: object, size: int) -> None:
        self.index = index
        self.size = size
        super().__init__(f"index {index!r} out of range for forest of size {size}")
