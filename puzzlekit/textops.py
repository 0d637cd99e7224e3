"""String puzzles: equivalence classes, greedy stacks, deletions and walks."""

from collections import Counter
from string import ascii_lowercase

from puzzlekit.disjoint_set import DisjointSet

_ALPHABET = len(ascii_lowercase)

# Quadrants: 0 -> NE, 1 -> NW, 2 -> SE, 3 -> SW.
# Each move lists the quadrants it heads towards and those it heads away from.
_MOVES = {
    "N": ((0, 1), (2, 3)),
    "S": ((2, 3), (0, 1)),
    "E": ((0, 2), (1, 3)),
}
_WEST = ((1, 3), (0, 2))


def _letter_index(ch):
    return ord(ch) - ord("a")


def smallest_equivalent_string(s1, s2, base_str):
    """Rewrite ``base_str`` with the smallest letter equivalent to each of its letters.

    ``s1[i]`` and ``s2[i]`` are declared equivalent for every position ``i``;
    the relation is closed under reflexivity, symmetry and transitivity.
    """
    if len(s1) != len(s2):
        raise ValueError("s1 and s2 must have the same length")
    classes = DisjointSet(_ALPHABET)
    for a, b in zip(s1, s2):
        classes.union(_letter_index(a), _letter_index(b))
    return "".join(ascii_lowercase[classes.find(_letter_index(ch))] for ch in base_str)


def robot_with_string(s):
    """Return the lexicographically smallest string a robot can write.

    Characters are taken from the front of ``s`` onto a stack, and the
    robot writes whatever sits on top of the stack.
    """
    remaining = Counter(s)
    letters = iter(ascii_lowercase)
    smallest = next(letters, None)

    def advance(current):
        while current is not None and remaining[current] == 0:
            current = next(letters, None)
        return current

    smallest = advance(smallest)
    stack = []
    written = []
    for ch in s:
        remaining[ch] -= 1
        stack.append(ch)
        smallest = advance(smallest)
        while stack and (smallest is None or stack[-1] <= smallest):
            written.append(stack.pop())
    written.extend(reversed(stack))
    return "".join(written)


def clear_stars(s):
    """Remove each ``*`` together with the latest smallest letter before it.

    A star with no letter left to its left stays in the result.
    """
    positions = {}
    deleted = set()
    for i, ch in enumerate(s):
        if ch == "*":
            candidates = [letter for letter, stack in positions.items() if stack]
            if candidates:
                deleted.add(positions[min(candidates)].pop())
                deleted.add(i)
        else:
            positions.setdefault(ch, []).append(i)
    return "".join(ch for i, ch in enumerate(s) if i not in deleted)


def answer_string(word, num_friends):
    """Return the largest piece obtainable when splitting ``word`` among friends.

    ``word`` is split into ``num_friends`` non-empty pieces in every
    possible way; the lexicographically largest piece over all splits is
    returned.
    """
    if num_friends == 1:
        return word
    window = max(len(word) - (num_friends - 1), 0)
    top = max(word, default="a")
    return max(
        (word[i:i + window] for i, ch in enumerate(word) if ch == top),
        default="",
    )


def minimum_deletions(word, k):
    """Fewest deletions so that any two letter frequencies differ by at most ``k``."""
    freqs = list(Counter(word).values())
    highest = max(freqs, default=0)
    costs = []
    for low in range(0, highest - k + 1):
        high = low + k
        costs.append(
            sum(f - high if f > high else f if f < low else 0 for f in freqs)
        )
    return min(costs, default=0)


def max_distance(s, k):
    """Largest Manhattan distance reached along path ``s`` after changing up to ``k`` moves."""
    if len(s) == k:
        return k
    budget = [k] * 4
    reach = [0] * 4
    best = 0
    for move in s:
        towards, away = _MOVES.get(move, _WEST)
        for quadrant in towards:
            reach[quadrant] += 1
        for quadrant in away:
            reach[quadrant] += 1 if budget[quadrant] > 0 else -1
            budget[quadrant] -= 1
        best = max(best, *reach)
    return best