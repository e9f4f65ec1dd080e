from src.binary_heap import (
    EmptyHeapError,
    Heap,
    HeapError,
    InvalidComparatorError,
    get_topk,
)
