"""Nim advisor: tells the player the winning move and tracks the game."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from functools import reduce
from operator import xor


class InvalidMove(ValueError):
    """A move that takes no stones, too many, or names a missing pile."""


@dataclass(frozen=True)
class Move:
    """Remove ``stones`` stones from the pile at zero-based index ``pile``."""

    stones: int
    pile: int


def nim_sum(piles: Sequence[int]) -> int:
    """Bitwise exclusive-or of all pile sizes."""
    return reduce(xor, piles, 0)


def winning_move(piles: Sequence[int]) -> Move | None:
    """The first move that leaves a zero nim sum, or None from a losing position."""
    total = nim_sum(piles)
    if total == 0:
        return None
    for index, stones in enumerate(piles):
        target = stones ^ total
        if target < stones:
            return Move(stones - target, index)
    return None


def apply_move(piles: Sequence[int], move: Move) -> list[int]:
    """Return the piles after ``move``; the input is left untouched."""
    if not 0 <= move.pile < len(piles):
        raise InvalidMove(f"no pile {move.pile + 1}")
    if not 1 <= move.stones <= piles[move.pile]:
        raise InvalidMove(
            f"cannot take {move.stones} stone(s) from a pile of {piles[move.pile]}"
        )
    result = list(piles)
    result[move.pile] -= move.stones
    return result


def is_over(piles: Sequence[int]) -> bool:
    """True once every pile is empty."""
    return not any(piles)


def format_piles(piles: Sequence[int]) -> str:
    return "Estado atual das pilhas: " + " ".join(str(p) for p in piles)


def _tokens(stream) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _read_int(tokens: Iterator[str]) -> int:
    try:
        return int(next(tokens))
    except StopIteration:
        raise EOFError("input ended") from None


def _read_move(tokens: Iterator[str]) -> Move:
    stones = _read_int(tokens)
    pile = _read_int(tokens)
    return Move(stones, pile - 1)


def _show(piles: Sequence[int]) -> None:
    print()
    print(format_piles(piles))


def _player_turn(piles: list[int], tokens: Iterator[str]) -> list[int]:
    move = winning_move(piles)
    if move is not None:
        print(f"Retire {move.stones} pedra(s) da pilha {move.pile + 1}.")
        return apply_move(piles, move)
    print("Voce esta em uma posição perdedora. Faça qualquer jogada valida.")
    while True:
        print("Digite sua jogada (qtd_pedras pilha): ", end="")
        try:
            return apply_move(piles, _read_move(tokens))
        except InvalidMove:
            print("Jogada invalida. Tente novamente.")


def _play(tokens: Iterator[str]) -> None:
    print("Digite o numero de pilhas: ", end="")
    count = _read_int(tokens)
    print("Digite a quantidade de pedras em cada pilha:")
    piles = [_read_int(tokens) for _ in range(count)]

    while True:
        _show(piles)
        piles = _player_turn(piles, tokens)
        _show(piles)
        if is_over(piles):
            print("Voce venceu!")
            return

        print("Digite a acao do adversario (qtd_pedras pilha): ", end="")
        try:
            piles = apply_move(piles, _read_move(tokens))
        except InvalidMove:
            print("Jogada invalida. Encerrando o programa.")
            return
        if is_over(piles):
            print("Seu adversario venceu!")
            return


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Play Nim against an opponent with optimal advice, reading moves from stdin."
    )
    parser.parse_args(argv)
    try:
        _play(_tokens(sys.stdin))
    except EOFError:
        print()
        return 1
    except ValueError:
        print()
        print("Entrada invalida.")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())