"""Command-line front end that reads a puzzle from stdin and prints its answer."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterator, Sequence

from .counting import queens_attack, waiter
from .greedy import candies, pylons


class _Tokens:
    """Whitespace-separated integers read from a text stream."""

    def __init__(self, text: str) -> None:
        self._items: Iterator[str] = iter(text.split())

    def take(self) -> int:
        token = next(self._items, None)
        if token is None:
            raise ValueError("unexpected end of input")
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"expected an integer, got {token!r}") from None

    def take_count(self) -> int:
        value = self.take()
        if value < 0:
            raise ValueError(f"count must not be negative, got {value}")
        return value

    def take_many(self, size: int) -> list[int]:
        return [self.take() for _ in range(size)]


def _run_candies(tokens: _Tokens) -> list[str]:
    size = tokens.take_count()
    return [str(candies(tokens.take_many(size)))]


def _run_waiter(tokens: _Tokens) -> list[str]:
    size = tokens.take_count()
    iterations = tokens.take_count()
    numbers = tokens.take_many(size)
    return [str(value) for value in waiter(numbers, iterations)]


def _run_pylons(tokens: _Tokens) -> list[str]:
    size = tokens.take_count()
    reach = tokens.take()
    towns = tokens.take_many(size)
    return [str(pylons(reach, towns))]


def _run_queens_attack(tokens: _Tokens) -> list[str]:
    board = tokens.take_count()
    obstacle_count = tokens.take_count()
    row, column = tokens.take(), tokens.take()
    obstacles = [tokens.take_many(2) for _ in range(obstacle_count)]
    return [str(queens_attack(board, row, column, obstacles))]


_COMMANDS: dict[str, tuple[Callable[[_Tokens], list[str]], str]] = {
    "candies": (_run_candies, "n, then n ratings"),
    "waiter": (_run_waiter, "n q, then n plate numbers"),
    "pylons": (_run_pylons, "n k, then n town flags (1 holds a plant)"),
    "queens-attack": (
        _run_queens_attack,
        "n k, then the queen's row and column, then k obstacle pairs",
    ),
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="algosolve",
        description="Solve a puzzle whose input is read from standard input.",
    )
    parser.add_argument(
        "problem",
        choices=sorted(_COMMANDS),
        help="; ".join(f"{name}: {text}" for name, (_, text) in sorted(_COMMANDS.items())),
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Read the chosen puzzle from stdin, print its answer and return an exit code."""
    args = _build_parser().parse_args(argv)
    solve, _ = _COMMANDS[args.problem]
    try:
        lines = solve(_Tokens(sys.stdin.read()))
    except ValueError as error:
        print(f"algosolve {args.problem}: {error}", file=sys.stderr)
        return 1
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())