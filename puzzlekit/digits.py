"""Digit-replacement and lexicographic-order number puzzles."""


def _first_not(digits, excluded):
    return next((c for c in digits if c not in excluded), None)


def max_diff(num):
    """Largest difference from two digit remappings, forbidding leading zeros and zero."""
    digits = str(num)
    target = _first_not(digits, "9")
    high = digits.replace(target, "9") if target else digits

    if digits[0] != "1":
        low = digits.replace(digits[0], "1")
    else:
        target = _first_not(digits[1:], (digits[0], "0"))
        low = digits.replace(target, "0") if target else digits
    return int(high) - int(low)


def min_max_difference(num):
    """Difference between the largest and smallest value from remapping one digit."""
    digits = str(num)
    target = _first_not(digits, "9")
    high = int(digits.replace(target, "9")) if target else int(digits)
    low = int(digits.replace(digits[0], "0"))
    return high - low


def _subtree_size(prefix, n):
    """Count numbers in ``1..n`` that start with ``prefix``."""
    size = 0
    current, following = prefix, prefix + 1
    while current <= n:
        size += min(n + 1, following) - current
        current *= 10
        following *= 10
    return size


def find_kth_number(n, k):
    """Return the k-th number (1-based) of ``1..n`` in lexicographic order."""
    result, position = 1, 1
    while position < k:
        size = _subtree_size(result, n)
        if position + size > k:
            result *= 10
            position += 1
        else:
            result += 1
            position += size
    return result


def lexical_order(n):
    """Return ``1..n`` sorted lexicographically."""
    result = []

    def visit(start, stop):
        for value in range(start, min(stop, n) + 1):
            result.append(value)
            visit(value * 10, value * 10 + 9)

    visit(1, 9)
    return result