"""Restricted path grammar: tokenizer, parser and serializer.

Curves use exactly four absolute instructions::

    M x y                      move
    L x y                      line
    C x1 y1, x2 y2, x y        cubic bezier
    Z                          close

Numbers are plain decimals. Commas and whitespace are interchangeable
separators. Anything else (relative commands, arcs, quadratics, stray
characters) is rejected with :class:`PathSyntaxError` rather than guessed at.
"""

from __future__ import annotations

import math
import re
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass

Point = tuple[float, float]

_TOKEN_RE = re.compile(
    r"""
    (?P<command>[A-Za-z])
    |(?P<number>[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)
    |(?P<separator>[\s,]+)
    |(?P<invalid>.)
    """,
    re.VERBOSE,
)

_ARITY = {"M": 2, "L": 2, "C": 6, "Z": 0}


class PathSyntaxError(ValueError):
    """Raised when a string is not a curve in the restricted grammar."""


@dataclass(frozen=True)
class MoveTo:
    x: float
    y: float


@dataclass(frozen=True)
class LineTo:
    x: float
    y: float


@dataclass(frozen=True)
class CubicTo:
    x1: float
    y1: float
    x2: float
    y2: float
    x: float
    y: float


@dataclass(frozen=True)
class ClosePath:
    pass


PathCommand = MoveTo | LineTo | CubicTo | ClosePath


@dataclass(frozen=True)
class Token:
    """A single lexical token: a command letter or a number."""

    kind: str  # "command" | "number"
    text: str
    offset: int


def tokenize_path(path: str) -> Iterator[Token]:
    """Split a path string into command and number tokens.

    Raises:
        PathSyntaxError: On any character outside the grammar.
    """
    for match in _TOKEN_RE.finditer(path):
        kind = match.lastgroup
        if kind == "separator":
            continue
        if kind == "invalid":
            raise PathSyntaxError(f"Unexpected character {match.group()!r} at offset {match.start()}")
        yield Token(kind=kind, text=match.group(), offset=match.start())


def _build(letter: str, args: list[float]) -> PathCommand:
    match letter:
        case "M":
            return MoveTo(*args)
        case "L":
            return LineTo(*args)
        case "C":
            return CubicTo(*args)
        case _:
            return ClosePath()


def parse_path(path: str) -> list[PathCommand]:
    """Parse a path string into typed commands.

    Repeated argument groups after M/L/C are accepted as in SVG (extra pairs
    after M are lines).

    Example:
        >>> parse_path("M 0 10 L 5 2 Z")
        [MoveTo(x=0.0, y=10.0), LineTo(x=5.0, y=2.0), ClosePath()]

    Raises:
        PathSyntaxError: If the string is outside the restricted grammar.
    """
    commands: list[PathCommand] = []
    letter: str | None = None
    args: list[float] = []

    def flush() -> None:
        nonlocal args
        if letter is None:
            return
        arity = _ARITY[letter]
        if arity == 0:
            if args:
                raise PathSyntaxError(f"'{letter}' takes no arguments")
            commands.append(ClosePath())
            return
        if not args or len(args) % arity:
            raise PathSyntaxError(
                f"'{letter}' expects a multiple of {arity} numbers, got {len(args)}"
            )
        for i in range(0, len(args), arity):
            group_letter = "L" if letter == "M" and i > 0 else letter
            commands.append(_build(group_letter, args[i : i + arity]))
        args = []

    for token in tokenize_path(path):
        if token.kind == "command":
            flush()
            if token.text not in _ARITY:
                raise PathSyntaxError(
                    f"Unsupported command {token.text!r} at offset {token.offset}"
                )
            letter = token.text
            args = []
        else:
            if letter is None:
                raise PathSyntaxError(f"Number before first command at offset {token.offset}")
            args.append(float(token.text))
    flush()

    return commands


def command_points(command: PathCommand) -> list[Point]:
    """Coordinate pairs of one command, control points included, in order."""
    match command:
        case MoveTo(x=x, y=y) | LineTo(x=x, y=y):
            return [(x, y)]
        case CubicTo():
            return [(command.x1, command.y1), (command.x2, command.y2), (command.x, command.y)]
        case _:
            return []


def extract_points(path: str) -> list[Point]:
    """All coordinate pairs of a path in order of appearance."""
    return [point for command in parse_path(path) for point in command_points(command)]


def format_number(value: float) -> str:
    """Render a coordinate as a plain decimal.

    Integral values drop the fractional part, negative zero prints as ``0``
    and exponent notation is never produced.

    Example:
        >>> format_number(120.0)
        '120'
        >>> format_number(-0.0)
        '0'
        >>> format_number(0.25)
        '0.25'
    """
    value = float(value)
    if not math.isfinite(value):
        return repr(value)
    if value.is_integer():
        return str(int(value))
    text = repr(value)
    if "e" in text:
        text = f"{value:.15f}".rstrip("0").rstrip(".")
    if text in ("-0", ""):
        return "0"
    return text


def serialize_command(command: PathCommand) -> str:
    """Render one command in the restricted grammar."""
    f = format_number
    match command:
        case MoveTo(x=x, y=y):
            return f"M {f(x)} {f(y)}"
        case LineTo(x=x, y=y):
            return f"L {f(x)} {f(y)}"
        case CubicTo(x1=x1, y1=y1, x2=x2, y2=y2, x=x, y=y):
            return f"C {f(x1)} {f(y1)}, {f(x2)} {f(y2)}, {f(x)} {f(y)}"
        case _:
            return "Z"


def serialize_path(commands: Iterable[PathCommand]) -> str:
    """Render a command sequence as a path string."""
    return " ".join(serialize_command(command) for command in commands)


def map_points(commands: Iterable[PathCommand], fn: Callable[[float, float], Point]) -> list[PathCommand]:
    """Apply ``fn(x, y) -> (x, y)`` to every coordinate pair of every command."""
    result: list[PathCommand] = []
    for command in commands:
        match command:
            case MoveTo(x=x, y=y):
                result.append(MoveTo(*fn(x, y)))
            case LineTo(x=x, y=y):
                result.append(LineTo(*fn(x, y)))
            case CubicTo():
                x1, y1 = fn(command.x1, command.y1)
                x2, y2 = fn(command.x2, command.y2)
                x, y = fn(command.x, command.y)
                result.append(CubicTo(x1, y1, x2, y2, x, y))
            case _:
                result.append(command)
    return result


def reverse_commands(commands: list[PathCommand]) -> list[PathCommand]:
    """Trace a single closed subpath in the opposite direction.

    The result starts where the input's last drawn segment ended; cubic
    control points swap so the traced shape is unchanged.
    """
    if not commands or not isinstance(commands[0], MoveTo):
        return list(commands)

    closed = isinstance(commands[-1], ClosePath)
    segments = commands[1:-1] if closed else commands[1:]
    ends: list[Point] = [(commands[0].x, commands[0].y)]
    for segment in segments:
        ends.append(command_points(segment)[-1])

    result: list[PathCommand] = [MoveTo(*ends[-1])]
    for index in range(len(segments) - 1, -1, -1):
        segment = segments[index]
        x, y = ends[index]
        if isinstance(segment, CubicTo):
            result.append(CubicTo(segment.x2, segment.y2, segment.x1, segment.y1, x, y))
        else:
            result.append(LineTo(x, y))
    if closed:
        result.append(ClosePath())
    return result
