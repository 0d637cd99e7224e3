"""Array puzzles: opening boxes, increasing pairs, pairing and grouping."""

from collections import deque

_SEARCH_LIMIT = 10**9


def max_candies(status, candies, keys, contained_boxes, initial_boxes):
    """Total candies collected by opening every box that can be reached.

    ``status[i]`` is 1 for an open box. Opening a box yields its candies,
    the keys it holds and the boxes inside it. The inputs are not modified.
    """
    opened = list(status)
    pending = deque(initial_boxes)
    total = 0
    while pending:
        progress = False
        for _ in range(len(pending)):
            box = pending.popleft()
            if opened[box] == 1:
                progress = True
                total += candies[box]
                for key in keys[box]:
                    opened[key] = 1
                pending.extend(contained_boxes[box])
            else:
                pending.append(box)
        if not progress:
            break
    return total


def maximum_difference(nums):
    """Largest ``nums[j] - nums[i]`` with ``i < j`` and ``nums[i] < nums[j]``, or -1."""
    best = -1
    lowest = None
    for num in nums:
        if lowest is not None and num > lowest:
            best = max(best, num - lowest)
        lowest = num if lowest is None else min(lowest, num)
    return best


def _can_pair(sorted_nums, threshold, pairs):
    count = 0
    i = 0
    while i < len(sorted_nums) - 1:
        if abs(sorted_nums[i] - sorted_nums[i + 1]) <= threshold:
            count += 1
            i += 2
        else:
            i += 1
        if count == pairs:
            return True
    return False


def minimize_max(nums, p):
    """Smallest possible maximum difference over ``p`` disjoint index pairs."""
    if p == 0:
        return 0
    ordered = sorted(nums)
    low, high, result = 0, _SEARCH_LIMIT, 0
    while low <= high:
        mid = (low + high) // 2
        if _can_pair(ordered, mid, p):
            result, high = mid, mid - 1
        else:
            low = mid + 1
    return result


def divide_array(nums, k):
    """Split ``nums`` into sorted triples whose spread is at most ``k``.

    Returns an empty list when that is impossible.
    """
    if len(nums) % 3:
        raise ValueError("the number of elements must be a multiple of 3")
    ordered = sorted(nums)
    groups = [ordered[i:i + 3] for i in range(0, len(ordered), 3)]
    if any(group[2] - group[0] > k for group in groups):
        return []
    return groups