"""Command line runner: feeds judge-style input to a named problem."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable
from dataclasses import dataclass

from drillbook.bitwise import (
    max_min_difference,
    max_or_with,
    max_zero_and_groups,
    min_time_both_skills,
    odd_one_out,
    operations_to_all_odd,
    special_matrix,
    xor_equal_candidate,
    xor_of_others,
)
from drillbook.puzzles import (
    count_charging_minutes,
    diversity_after_increment,
    diversity_with_set,
    max_draws,
    max_product_after_increments,
    reduce_grid,
)
from drillbook.sequences import (
    blender_time,
    halving_sum,
    or_chain_sequence,
    profitable_deposit,
    split_into_distinct,
)

__all__ = ["PROBLEMS", "run", "main"]


class _Tokens:
    """Whitespace-separated tokens read one at a time."""

    def __init__(self, text: str) -> None:
        self._tokens = iter(text.split())

    def word(self) -> str:
        try:
            return next(self._tokens)
        except StopIteration:
            raise ValueError("input ended before the data it announced") from None

    def number(self) -> int:
        token = self.word()
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"expected an integer, got {token!r}") from None

    def numbers(self, count: int) -> list[int]:
        return [self.number() for _ in range(count)]

    def counted(self) -> list[int]:
        return self.numbers(self.number())


@dataclass(frozen=True)
class _Problem:
    solve: Callable[[_Tokens], str]
    repeated: bool = True


def _or_minus_one(value: int | None) -> str:
    return "-1" if value is None else str(value)


def _listing(values: list[int]) -> str:
    return f"{len(values)}\n" + "".join(f"{v} " for v in values)


def _reduce_grid(tokens: _Tokens) -> str:
    n, k = tokens.numbers(2)
    cells = ""
    while len(cells) < n * n:
        cells += tokens.word()
    rows = [cells[start:start + n] for start in range(0, n * n, n)]
    return "\n".join(reduce_grid(rows, k))


def _special_matrix(tokens: _Tokens) -> str:
    rows, cols = tokens.numbers(2)
    return "".join(
        " ".join(map(str, row)) + "\n" for row in special_matrix(rows, cols)
    )


def _both_skills(tokens: _Tokens) -> str:
    count = tokens.number()
    books = [(tokens.number(), tokens.word()) for _ in range(count)]
    return _or_minus_one(min_time_both_skills(books))


def _max_or(tokens: _Tokens) -> str:
    n, z = tokens.numbers(2)
    return str(max_or_with(z, tokens.numbers(n)))


def _split(tokens: _Tokens) -> str:
    n = tokens.number()
    if n == 1:
        return "1\n1"
    return _listing(split_into_distinct(n))


PROBLEMS: dict[str, _Problem] = {
    "max-product": _Problem(lambda t: str(max_product_after_increments(*t.numbers(3)))),
    "reduce-grid": _Problem(_reduce_grid),
    "charging": _Problem(
        lambda t: str(count_charging_minutes(*t.numbers(2))), repeated=False
    ),
    "draws": _Problem(lambda t: _or_minus_one(max_draws(*t.numbers(3)))),
    "diversity": _Problem(lambda t: str(diversity_with_set(t.counted()))),
    "diversity-count": _Problem(lambda t: str(diversity_after_increment(t.counted()))),
    "all-odd": _Problem(lambda t: str(operations_to_all_odd(t.counted()))),
    "xor-of-others": _Problem(lambda t: str(xor_of_others(t.counted()))),
    "special-matrix": _Problem(_special_matrix),
    "max-min": _Problem(lambda t: str(max_min_difference(t.counted()))),
    "xor-equal": _Problem(lambda t: _or_minus_one(xor_equal_candidate(t.counted()))),
    "both-skills": _Problem(_both_skills),
    "zero-and-groups": _Problem(lambda t: str(max_zero_and_groups(t.counted()))),
    "odd-one-out": _Problem(lambda t: str(odd_one_out(*t.numbers(3)))),
    "max-or": _Problem(_max_or),
    "split": _Problem(_split, repeated=False),
    "blender": _Problem(lambda t: str(blender_time(*t.numbers(3)))),
    "deposit": _Problem(lambda t: str(profitable_deposit(*t.numbers(2)))),
    "halving": _Problem(lambda t: str(halving_sum(t.number()))),
    "or-chain": _Problem(lambda t: _listing(or_chain_sequence(t.number()))),
}


def run(problem: str, text: str) -> str:
    """Solve ``problem`` for the input ``text`` and return the output.

    Problems that take several cases read the case count first and end
    each case's answer with a newline.
    """
    try:
        spec = PROBLEMS[problem]
    except KeyError:
        raise ValueError(
            f"unknown problem {problem!r}; choose from {', '.join(sorted(PROBLEMS))}"
        ) from None
    tokens = _Tokens(text)
    if not spec.repeated:
        return spec.solve(tokens)
    cases = tokens.number()
    return "".join(spec.solve(tokens) + "\n" for _ in range(cases))


def main(argv: list[str] | None = None) -> int:
    """Read a problem's input from a file or standard input and print the answer."""
    parser = argparse.ArgumentParser(
        prog="drillbook", description="Solve a practice problem from judge-style input."
    )
    parser.add_argument("problem", choices=sorted(PROBLEMS))
    parser.add_argument("input", nargs="?", help="input file (default: standard input)")
    args = parser.parse_args(argv)
    try:
        if args.input is None:
            text = sys.stdin.read()
        else:
            with open(args.input, encoding="utf-8") as handle:
                text = handle.read()
        sys.stdout.write(run(args.problem, text))
    except (OSError, ValueError) as error:
        print(f"drillbook: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())