# filename: huffman_core.py

import enum
import heapq
import itertools
import logging
from collections.abc import Mapping

logger = logging.getLogger(__name__)


class HuffmanError(Exception):
    pass


class EmptyAlphabet(HuffmanError, ValueError):
    pass


class DuplicateSymbol(HuffmanError, ValueError):
    pass


class InvalidWeight(HuffmanError, ValueError):
    pass


class CapacityExceeded(HuffmanError, OverflowError):
    pass


class EmptyQueue(HuffmanError, IndexError):
    pass


class TieBreak(enum.Enum):
    # equal weights land wherever the heap comparison leaves them
    HEAP = "heap"
    # equal weights come out in the order they entered the queue
    INSERTION = "insertion"


class HuffmanNode:
    def __init__(self, symbol, weight, left=None, right=None):
        self.symbol = symbol
        self.weight = weight
        self.left = left
        self.right = right

    @property
    def is_leaf(self):
        return self.left is None and self.right is None

    def __lt__(self, other):
        return self.weight < other.weight

    def __repr__(self):
        if self.is_leaf:
            return f"HuffmanNode({self.symbol!r}, {self.weight})"
        return f"HuffmanNode(<internal>, {self.weight})"


class MinHeap:
    """Min-heap of HuffmanNode ranked by weight, bounded by a fixed capacity.

    The capacity is the alphabet size: every merge takes two nodes out and
    puts one back, so occupancy never grows past the initial seed.
    """

    def __init__(self, capacity, tie_break=TieBreak.HEAP):
        self.capacity = capacity
        self.tie_break = TieBreak(tie_break)
        self._array = []
        self._counter = itertools.count()

    def __len__(self):
        return len(self._array)

    def _entry(self, node):
        if self.tie_break is TieBreak.INSERTION:
            return (node.weight, next(self._counter), node)
        return node

    @staticmethod
    def _node(entry):
        return entry[-1] if isinstance(entry, tuple) else entry

    def build(self, items):
        items = list(items)
        if not items:
            raise EmptyAlphabet("cannot build a heap from an empty alphabet")
        if len(items) > self.capacity:
            raise CapacityExceeded(
                f"{len(items)} items do not fit in a heap of capacity {self.capacity}"
            )
        self._array = [self._entry(HuffmanNode(symbol, weight)) for symbol, weight in items]
        heapq.heapify(self._array)

    def insert(self, node):
        if len(self._array) >= self.capacity:
            raise CapacityExceeded(f"heap is full at capacity {self.capacity}")
        heapq.heappush(self._array, self._entry(node))

    def extract_min(self):
        if not self._array:
            raise EmptyQueue("extract_min called on an empty heap")
        return self._node(heapq.heappop(self._array))

    def peek(self):
        if not self._array:
            raise EmptyQueue("peek called on an empty heap")
        return self._node(self._array[0])

    def is_size_one(self):
        return len(self._array) == 1


class CodeTable(Mapping):
    """Read-only mapping from symbol to its code, a string of '0' and '1'."""

    def __init__(self, codes):
        self._codes = dict(codes)

    def __getitem__(self, symbol):
        return self._codes[symbol]

    def __iter__(self):
        return iter(self._codes)

    def __len__(self):
        return len(self._codes)

    def __repr__(self):
        return f"CodeTable({self._codes!r})"

    @property
    def max_length(self):
        return max((len(code) for code in self._codes.values()), default=0)

    def weighted_length(self, frequencies):
        """Total bits needed to encode every symbol `frequencies` times."""
        if not isinstance(frequencies, Mapping):
            frequencies = dict(frequencies)
        return sum(freq * len(self._codes[symbol]) for symbol, freq in frequencies.items())

    def is_prefix_free(self):
        # once sorted, a code that prefixes another sits directly before some code it prefixes
        codes = sorted(self._codes.values())
        return all(not b.startswith(a) for a, b in zip(codes, codes[1:]))


class HuffmanLogic:
    def build_tree(self, items, tie_break=TieBreak.HEAP):
        items = list(items)
        if not items:
            raise EmptyAlphabet("cannot build a Huffman tree from an empty alphabet")

        priority_queue = MinHeap(len(items), tie_break)
        priority_queue.build(items)

        # Iteratively merge the two lightest nodes until only the root is left
        while not priority_queue.is_size_one():
            left = priority_queue.extract_min()
            right = priority_queue.extract_min()
            merged = HuffmanNode(None, left.weight + right.weight, left, right)
            logger.debug("merged %r + %r -> %d", left, right, merged.weight)
            priority_queue.insert(merged)

        return priority_queue.extract_min()

    def generate_codes(self, node):
        if node.is_leaf:
            return CodeTable({node.symbol: "0"})

        codes = {}
        # right is pushed first so the left subtree is visited first
        stack = [(node, "")]
        while stack:
            current, code = stack.pop()
            if current.is_leaf:
                codes[current.symbol] = code
                continue
            stack.append((current.right, code + "1"))
            stack.append((current.left, code + "0"))
        return CodeTable(codes)


def build_huffman_tree(items, tie_break=TieBreak.HEAP):
    return HuffmanLogic().build_tree(items, tie_break)


def generate_codes(root):
    return HuffmanLogic().generate_codes(root)


def huffman_codes(items, tie_break=TieBreak.HEAP):
    logic = HuffmanLogic()
    return logic.generate_codes(logic.build_tree(items, tie_break))
