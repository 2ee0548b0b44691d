# filename: huffman_service.py

import logging
from collections import Counter

from huffman_core import (
    DuplicateSymbol,
    EmptyAlphabet,
    HuffmanLogic,
    InvalidWeight,
    TieBreak,
)

logger = logging.getLogger(__name__)

TABLE_HEADER = "Char | Huffman code"
TABLE_RULE = "-" * 20


class HuffmanService:
    def __init__(self, tie_break=TieBreak.HEAP, validate=True):
        self.logic = HuffmanLogic()
        self.tie_break = TieBreak(tie_break)
        self.validate = validate

    def check_items(self, items):
        if not items:
            raise EmptyAlphabet("at least one (symbol, weight) pair is required")
        seen = set()
        for symbol, weight in items:
            if symbol in seen:
                raise DuplicateSymbol(f"symbol {symbol!r} appears more than once")
            seen.add(symbol)
            if isinstance(weight, bool) or not isinstance(weight, int) or weight < 0:
                raise InvalidWeight(f"weight for {symbol!r} must be a non-negative integer, got {weight!r}")

    def build_codes(self, items):
        items = list(items)
        if self.validate:
            self.check_items(items)
        tree = self.logic.build_tree(items, self.tie_break)
        codes = self.logic.generate_codes(tree)
        logger.info(
            "derived %d codes, total weight %d, longest code %d bits",
            len(codes), tree.weight, codes.max_length,
        )
        return codes

    def codes_from_data(self, data):
        # Frequency analysis of the input symbols, in first-seen order
        freqs = Counter(data)
        return self.build_codes(freqs.items())

    def format_codes(self, codes):
        lines = [TABLE_HEADER, TABLE_RULE]
        lines.extend(f"{symbol}: {code}" for symbol, code in codes.items())
        return "\n".join(lines)
