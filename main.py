import logging

from src.binary_heap import Heap, get_topk

logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

priorities = [10.5, 3.2, 15.0, 7.8, 20.1, 1.5]
elements = ["low", "very_low", "medium", "low_med", "high", "lowest"]

# Min heap on (priority, element) pairs, ordered by priority only
print("Creating heap...")
heap = Heap.with_comparator(lambda a, b: a[0] < b[0])
for pair in zip(priorities, elements):
    heap.push(pair)

# Test basic properties
print(f"Heap size: {heap.size()}")
print(f"Is empty: {heap.empty()}")
print(f"Top: {heap.top()}")
print(f"Top 3: {get_topk(heap, 3)}")

print("Draining...")
while not heap.empty():
    print(f"  {heap.top()}")
    heap.pop()

# Popping an empty heap is a no-op
heap.pop()
print(f"Heap size after extra pop: {heap.size()}")

max_heap = Heap.max_heap()
for p in priorities:
    max_heap.push(p)
print(f"Max heap top: {max_heap.top()}")
