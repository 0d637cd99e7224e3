"""Minimum candies for children in a row, where higher ratings earn more than neighbours."""


def candy(ratings):
    """Hand out candies by visiting children from lowest to highest rating."""
    n = len(ratings)
    if n == 1:
        return 1
    given = [0] * n
    for i in sorted(range(n), key=lambda idx: (ratings[idx], idx)):
        count = 1
        if i > 0 and ratings[i - 1] < ratings[i]:
            count = max(count, given[i - 1] + 1)
        if i < n - 1 and ratings[i + 1] < ratings[i]:
            count = max(count, given[i + 1] + 1)
        given[i] = count
    return sum(given)


def candy_two_pass(ratings):
    """Hand out candies with one left-to-right and one right-to-left sweep."""
    if not ratings:
        return 0
    left = [1]
    for prev, cur in zip(ratings, ratings[1:]):
        left.append(left[-1] + 1 if cur > prev else 1)
    right = [1]
    for nxt, cur in zip(reversed(ratings), list(reversed(ratings))[1:]):
        right.append(right[-1] + 1 if cur > nxt else 1)
    right.reverse()
    return sum(max(a, b) for a, b in zip(left, right))