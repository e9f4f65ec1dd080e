class HeapError(Exception):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return f"{self.__class__.__name__}: {self.message}"


class InvalidComparatorError(HeapError, ValueError):
    """Raised when a heap is built without a usable ``less`` predicate."""


class EmptyHeapError(HeapError, RuntimeError):
    """Raised when the top of an empty heap is requested."""
