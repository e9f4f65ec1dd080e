from src.binary_heap.exceptions import (
    EmptyHeapError,
    HeapError,
    InvalidComparatorError,
)
from src.binary_heap.heap import Heap
from src.binary_heap.topk import get_topk
