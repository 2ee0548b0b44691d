import itertools
import os
import sys

# Put repository_after on the path so the suite runs without an install
REPO_AFTER = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'repository_after'))
if REPO_AFTER not in sys.path:
	sys.path.insert(0, REPO_AFTER)


def brute_force_optimal_length(weights):
	"""Smallest sum(w * l) over all length vectors satisfying Kraft's inequality.

	Any such length vector is realisable as a prefix-free code, so this is the
	optimum over every prefix-free binary code for `weights`.
	"""
	n = len(weights)
	if n == 1:
		return weights[0]
	max_len = n - 1
	best = None
	for lengths in itertools.product(range(1, max_len + 1), repeat=n):
		if sum(2 ** (max_len - l) for l in lengths) > 2 ** max_len:
			continue
		total = sum(w * l for w, l in zip(weights, lengths))
		if best is None or total < best:
			best = total
	return best


def walk(node):
	stack = [node]
	while stack:
		current = stack.pop()
		yield current
		if not current.is_leaf:
			stack.append(current.left)
			stack.append(current.right)
