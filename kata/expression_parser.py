"""Tokenizing and parsing a tiny language of sums and differences."""

from __future__ import annotations

import argparse
import enum
import re
import sys
from dataclasses import dataclass
from typing import Iterator, Optional, Sequence, Union

_MAX_NUMBER = 0xFFFFFFFF

_TOKEN_PATTERN = re.compile(
    r"(?P<number>[0-9]+)"
    r"|(?P<identifier>[a-z_][a-z0-9_]*)"
    r"|(?P<operator>[+-])"
    r"|(?P<other>.)",
    re.DOTALL,
)


class Op(enum.Enum):
    """An arithmetic operator."""

    ADD = "+"
    SUB = "-"


@dataclass(frozen=True)
class NumberToken:
    """A run of decimal digits."""

    text: str


@dataclass(frozen=True)
class IdentifierToken:
    """A variable name."""

    name: str


@dataclass(frozen=True)
class OperatorToken:
    """An arithmetic operator."""

    op: Op


Token = Union[NumberToken, IdentifierToken, OperatorToken]


@dataclass(frozen=True)
class Var:
    """A reference to a variable."""

    name: str


@dataclass(frozen=True)
class Number:
    """A literal number."""

    value: int


@dataclass(frozen=True)
class Operation:
    """A binary operation."""

    left: "Expression"
    op: Op
    right: "Expression"


Expression = Union[Var, Number, Operation]


class TokenizerError(ValueError):
    """Raised when the input holds a character that starts no token."""

    def __init__(self, character: str) -> None:
        super().__init__(f"Unexpected character '{character}' in input")
        self.character = character


class ParserError(ValueError):
    """Raised when the input is not a valid expression."""


def tokenize(text: str) -> Iterator[Token]:
    """Yield the tokens of ``text`` in order.

    Raises TokenizerError when it reaches a character that starts no token.
    """
    for match in _TOKEN_PATTERN.finditer(text):
        kind = match.lastgroup
        lexeme = match.group()
        if kind == "number":
            yield NumberToken(lexeme)
        elif kind == "identifier":
            yield IdentifierToken(lexeme)
        elif kind == "operator":
            yield OperatorToken(Op(lexeme))
        else:
            raise TokenizerError(lexeme)


def _pull(tokens: Iterator[Token]) -> Optional[Token]:
    try:
        return next(tokens, None)
    except TokenizerError as err:
        raise ParserError(f"Tokenizer error: {err}") from err


def _operand(token: Optional[Token]) -> Expression:
    if token is None:
        raise ParserError("Unexpected end of input")
    if isinstance(token, NumberToken):
        value = int(token.text)
        if value > _MAX_NUMBER:
            raise ParserError("Invalid number")
        return Number(value)
    if isinstance(token, IdentifierToken):
        return Var(token.name)
    raise ParserError(f"Unexpected token {token!r}")


def parse(text: str) -> Expression:
    """Parse ``text`` into an expression; operators group to the right."""
    tokens = tokenize(text)
    operands: list[Expression] = []
    operators: list[Op] = []
    while True:
        operands.append(_operand(_pull(tokens)))
        token = _pull(tokens)
        if token is None:
            break
        if not isinstance(token, OperatorToken):
            raise ParserError(f"Unexpected token {token!r}")
        operators.append(token.op)

    expression = operands.pop()
    for operand, op in zip(reversed(operands), reversed(operators)):
        expression = Operation(operand, op, expression)
    return expression


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse an expression and print its tree."""
    parser = argparse.ArgumentParser(description=main.__doc__)
    parser.add_argument("expression", nargs="?", default="10+foo+20-30")
    args = parser.parse_args(argv)
    try:
        expression = parse(args.expression)
    except ParserError as err:
        print(f"Error: {err}", file=sys.stderr)
        return 1
    print(repr(expression))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())