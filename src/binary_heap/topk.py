import logging
import operator
from typing import Any

from src.binary_heap.heap import Heap

logger = logging.getLogger(__name__)


def get_topk(heap: Heap, k: int) -> list[Any]:
    """
    Function to get the top-K elements from a heap.

    Elements are returned in the order the heap would release them, so for
    the default ordering these are the K smallest elements and for a heap
    built with ``Heap.max_heap()`` the K largest. The heap itself is left
    untouched.

    Parameters
    ----------
    heap : Heap
        A Heap object
    k : int
        The number of 'top-K' elements to retrieve.

    Returns
    -------
    list[Any]
        The 'top-K' elements, fewer if the heap holds less than K.

    Raises
    ------
    TypeError
        If ``k`` is not an integer.
    """
    k = operator.index(k)
    if k <= 0:
        return []
    if heap.empty():
        return []

    drained = heap.copy()
    result = []
    while len(result) < k and not drained.empty():
        result.append(drained.top())
        drained.pop()

    logger.debug("get_topk: %d of %d elements requested", k, len(heap))
    return result
