# desafios

A collection of small puzzles and programming contest problems, each usable
as a library function and from the command line. It has no dependencies
beyond the Python standard library.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## The knight's circuit (`desafios.knight`)

A knight starts in one corner of a square board and must visit the other
three corners clockwise, then return to where it started. Because the board
is symmetric, the answer is four times the shortest path to a neighbouring
corner.

```python
from desafios.knight import bfs_corner_distance, dfs_corner_distance, circuit_moves

bfs_corner_distance(8)       # fewest moves from (0, 0) to (7, 0), or None if unreachable
dfs_corner_distance(8)       # the same distance, found by pruned exhaustive search
circuit_moves(8, "bfs")      # moves for the whole circuit; 0 when no circuit exists
```

A board size below 1, or a method other than `"bfs"` or `"dfs"`, raises
`ValueError`.

From the command line (defaults: `--size 8 --method bfs`):

```
desafios-knight --size 8 --method dfs
```

The depth-first method is recursive and is meant for small boards; use the
breadth-first method for large ones.

## Nim (`desafios.nim`)

An advisor for the game of Nim. On your turn it computes the nim sum of the
piles; from a winning position it tells you which stones to take, and from a
losing one it asks you for any valid move. It then asks for your opponent's
move, until one side empties every pile.

```python
from desafios.nim import Move, InvalidMove, nim_sum, winning_move, apply_move, is_over, format_piles

piles = [3, 4, 5]
nim_sum(piles)                  # 2
move = winning_move(piles)      # a Move(stones, pile), pile counted from 0; None when losing
piles = apply_move(piles, move) # returns new piles, the input is not changed
is_over(piles)                  # True once every pile is empty
print(format_piles(piles))
```

`apply_move` raises `InvalidMove` (a `ValueError`) when a move names a pile
that does not exist, takes no stones, or takes more stones than the pile
holds.

Play from the terminal; the program reads the number of piles, the pile
sizes and then the moves (`stones pile`, piles counted from 1) from
standard input:

```
desafios-nim
```

The opponent's moves are typed in by hand: the program does not play
against you, and an invalid opponent move ends the game.

## Contest problems (`desafios.contest`)

Solutions to a set of contest problems, each as a plain function:

| Function | Problem |
| --- | --- |
| `fits_capacity(w, a, b, c)` | do three loads fit together in capacity `w` |
| `in_region(x, y)` | is a point inside the figure made of six tiles |
| `count_combinations(n, p, s, exceptions)` | sandwiches of one bread, one sausage and any extras, avoiding forbidden pairs |
| `best_two_windows(d, products)` | largest value covered by two windows of width `d` over `(position, value)` pairs |
| `route_length(temperatures, k, edges)` | edges walked from node 1 to visit every node of a tree hotter than `k` |
| `classify_plate(text)` | `"S"`, `"T"` or `"N"` for a plate with one unknown character |
| `partitions_without(n, k)` | partitions of `n` with no part equal to `k`, modulo 998244353 |
| `can_separate(columns)` | can two columns of blocks be sorted into 1s and 2s |
| `max_prime_occurrences(values)` | after each toggle, the count for the most common prime divisor |

```python
from desafios.contest import fits_capacity, partitions_without

fits_capacity(10, 2, 3, 4)   # True
partitions_without(5, 2)     # 4
```

The command takes a problem letter (`A`, `C`, `D`, `E`, `F`, `G`, `K`, `L`
or `N`), reads that problem's input from standard input and prints its
answer:

```
desafios-contest K < input.txt
```

Input that ends early or holds invalid values is reported on standard error
with exit status 1.