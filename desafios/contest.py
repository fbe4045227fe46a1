"""Solutions to a set of programming-contest problems.

Each problem is exposed as a plain function over Python values; ``main``
reads a problem's input from stdin and prints its answer.
"""

from __future__ import annotations

import argparse
import sys
from collections import Counter
from collections.abc import Callable, Iterable, Iterator, Sequence
from functools import lru_cache

MOD = 998244353


def fits_capacity(w: int, a: int, b: int, c: int) -> bool:
    """True when three loads of size a, b and c fit together in capacity w."""
    return w >= a + b + c


def in_region(x: int, y: int) -> bool:
    """True when the point (x, y) lies inside the figure made of six tiles."""
    if x >= 0 and y >= 0 and x + y <= 100:
        return True
    if 0 <= x <= 100 and -100 <= y <= 0:
        return True
    if 100 <= x <= 200 and -100 <= y <= 0 and (x - 100) - y <= 100:
        return True
    if -100 <= x <= 0 and 0 <= y <= 100:
        return True
    if -100 <= x <= 0 and -100 <= y <= 0 and -x - y <= 100:
        return True
    if -200 <= x <= -100 and 0 <= y <= 100 and -(x + 100) + y <= 100:
        return True
    return False


def count_combinations(
    n: int, p: int, s: int, exceptions: Iterable[tuple[int, int]]
) -> int:
    """Count sandwiches of one bread, one sausage and any set of extras.

    Ingredients are numbered from 1: the first ``p`` are breads, the next
    ``s`` are sausages and the remaining ``n - p - s`` are extras. A pair in
    ``exceptions`` names two ingredients that may not be used together.
    """
    forbidden = []
    for first, second in exceptions:
        if first < 1 or second < 1:
            raise ValueError(f"ingredients are numbered from 1, got {(first, second)}")
        forbidden.append((1 << (first - 1)) | (1 << (second - 1)))

    extras = n - p - s
    if extras < 0:
        return 0

    total = 0
    for bread in range(p):
        for sausage in range(p, p + s):
            base = (1 << bread) | (1 << sausage)
            for subset in range(1 << extras):
                chosen = base | (subset << (p + s))
                if all(chosen & pair != pair for pair in forbidden):
                    total += 1
    return total


def best_two_windows(d: int, products: Iterable[tuple[int, int]]) -> int:
    """Largest total value covered by two windows of width ``d``.

    ``products`` holds (position, value) pairs.
    """
    if d < 0:
        raise ValueError(f"window width must not be negative, got {d}")
    items = sorted(products, key=lambda item: item[0])
    if not items:
        return 0

    best_prefix: list[int] = []
    result = 0
    current = 0
    current_max = 0
    left = 0
    for i, (position, value) in enumerate(items):
        current += value
        while position - items[left][0] > d:
            current -= items[left][1]
            left += 1

        if i == 0:
            result = value
            current_max = value
            best_prefix.append(value)
            continue

        current_max = max(current_max, current)
        best_prefix.append(current_max)
        if left == 0:
            result = current_max
        else:
            result = max(result, current + best_prefix[left - 1])
    return result


def route_length(
    temperatures: Sequence[int], k: int, edges: Iterable[tuple[int, int]]
) -> int:
    """Edges walked from node 1 to visit every node hotter than ``k``.

    ``edges`` joins nodes numbered from 1; the walk need not return.
    """
    n = len(temperatures)
    if n == 0:
        raise ValueError("the tree needs at least one node")
    graph: list[list[int]] = [[] for _ in range(n)]
    for u, v in edges:
        if not (1 <= u <= n and 1 <= v <= n):
            raise ValueError(f"edge {(u, v)} names a node outside 1..{n}")
        graph[u - 1].append(v - 1)
        graph[v - 1].append(u - 1)

    visited = [False] * n
    visited[0] = True
    deepest = 0
    # Each frame: node, depth, pending neighbours, nodes gathered from children.
    stack: list[list] = [[0, 0, iter(graph[0]), 0]]
    total = 0
    while stack:
        frame = stack[-1]
        node, depth, pending, gathered = frame
        child = next((c for c in pending if not visited[c]), None)
        if child is not None:
            visited[child] = True
            stack.append([child, depth + 1, iter(graph[child]), 0])
            continue
        stack.pop()
        if gathered:
            deepest = max(deepest, depth)
            value = gathered + 1
        elif temperatures[node] > k:
            deepest = max(deepest, depth)
            value = 1
        else:
            value = 0
        if stack:
            stack[-1][3] += value
        else:
            total = value

    if total == 2:
        return 1
    if total > 1:
        return (total - 1) * 2 - deepest
    return 0


def classify_plate(text: str) -> str:
    """'S' when the hidden character belongs to the country part, 'T' for the
    state part, 'N' otherwise."""
    if text in ("?R-SP", "B?-SP", "BR?SP"):
        return "S"
    if text in ("BR-?P", "BR-S?"):
        return "T"
    return "N"


def partitions_without(n: int, k: int) -> int:
    """Partitions of ``n`` that use no part equal to ``k``, modulo 998244353."""
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    ways = [1] + [0] * n
    for part in range(1, n + 1):
        if part == k:
            continue
        for total in range(part, n + 1):
            ways[total] = (ways[total] + ways[total - part]) % MOD
    return ways[n]


def can_separate(columns: Sequence[Sequence[int]]) -> bool:
    """Whether the columns can be sorted so the first holds only 1s and the
    second only 2s. Each column is listed from bottom to top."""
    if len(columns) != 2:
        return True
    first = list(columns[0])
    second = list(columns[1])

    while first and first[-1] != 1:
        first.pop()
        second.append(2)
    while second and second[-1] != 2:
        second.pop()
        first.append(1)

    return 2 not in first and 1 not in second


@lru_cache(maxsize=None)
def _prime_divisors(value: int) -> tuple[int, ...]:
    primes = []
    remaining = value
    factor = 2
    while factor * factor <= remaining:
        if remaining % factor == 0:
            primes.append(factor)
            while remaining % factor == 0:
                remaining //= factor
        factor += 1
    if remaining > 1:
        primes.append(remaining)
    return tuple(primes)


def max_prime_occurrences(values: Iterable[int]) -> list[int]:
    """Toggle each value in or out of a set and report, after every step,
    how many members share the most common prime divisor."""
    members: set[int] = set()
    counts: Counter[int] = Counter()
    frequency: Counter[int] = Counter()
    highest = 0
    answers = []
    for value in values:
        if value < 0:
            raise ValueError(f"values must not be negative, got {value}")
        step = -1 if value in members else 1
        divisors = _prime_divisors(value)
        for prime in divisors:
            old = counts[prime]
            new = old + step
            counts[prime] = new
            frequency[old] -= 1
            frequency[new] += 1
            if new > highest:
                highest = new
            elif old == highest and frequency[old] <= 0 and new < old:
                highest = new
        if divisors:
            members.symmetric_difference_update({value})
        answers.append(highest)
    return answers


def _tokens(stream) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _ints(tokens: Iterator[str]) -> Callable[[], int]:
    def read() -> int:
        try:
            return int(next(tokens))
        except StopIteration:
            raise EOFError("input ended") from None

    return read


def _solve_a(tokens: Iterator[str]) -> str:
    read = _ints(tokens)
    w, a, b, c = read(), read(), read(), read()
    return "S" if fits_capacity(w, a, b, c) else "N"


def _solve_c(tokens: Iterator[str]) -> str:
    read = _ints(tokens)
    lines = []
    for _ in range(read()):
        x, y = read(), read()
        lines.append("S" if in_region(x, y) else "N")
    return "\n".join(lines)


def _solve_d(tokens: Iterator[str]) -> str:
    read = _ints(tokens)
    n, m, p, s = read(), read(), read(), read()
    exceptions = [(read(), read()) for _ in range(m)]
    return str(count_combinations(n, p, s, exceptions))


def _solve_e(tokens: Iterator[str]) -> str:
    read = _ints(tokens)
    n, d = read(), read()
    products = [(read(), read()) for _ in range(n)]
    return str(best_two_windows(d, products))


def _solve_f(tokens: Iterator[str]) -> str:
    read = _ints(tokens)
    n, k = read(), read()
    temperatures = [read() for _ in range(n)]
    edges = [(read(), read()) for _ in range(n - 1)]
    return str(route_length(temperatures, k, edges))


def _solve_g(tokens: Iterator[str]) -> str:
    try:
        text = next(tokens)
    except StopIteration:
        raise EOFError("input ended") from None
    return classify_plate(text)


def _solve_k(tokens: Iterator[str]) -> str:
    read = _ints(tokens)
    n, k = read(), read()
    return str(partitions_without(n, k))


def _solve_l(tokens: Iterator[str]) -> str:
    read = _ints(tokens)
    columns = []
    for _ in range(read()):
        size = read()
        columns.append([read() for _ in range(size)])
    return "S" if can_separate(columns) else "N"


def _solve_n(tokens: Iterator[str]) -> str:
    read = _ints(tokens)
    values = [read() for _ in range(read())]
    return "\n".join(str(answer) for answer in max_prime_occurrences(values))


_SOLVERS: dict[str, Callable[[Iterator[str]], str]] = {
    "A": _solve_a,
    "C": _solve_c,
    "D": _solve_d,
    "E": _solve_e,
    "F": _solve_f,
    "G": _solve_g,
    "K": _solve_k,
    "L": _solve_l,
    "N": _solve_n,
}


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Solve one contest problem, reading its input from stdin."
    )
    parser.add_argument("problem", type=str.upper, choices=sorted(_SOLVERS))
    args = parser.parse_args(argv)
    try:
        output = _SOLVERS[args.problem](_tokens(sys.stdin))
    except EOFError:
        print("input ended early", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"invalid input: {exc}", file=sys.stderr)
        return 1
    if output:
        print(output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())