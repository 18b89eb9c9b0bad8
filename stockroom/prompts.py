"""Validated reading of lines and numbers from an interactive stream."""

from __future__ import annotations

import math
import re
import sys
from typing import TextIO

_INT_RE = re.compile(r"[+-]?\d+")
_FLOAT_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1

INVALID_NUMBER = "Input tidak valid. Masukkan angka: "


class InputExhausted(EOFError):
    """Raised when the input stream ends before a value could be read."""


def _streams(stdin: TextIO | None, stdout: TextIO | None) -> tuple[TextIO, TextIO]:
    return (
        stdin if stdin is not None else sys.stdin,
        stdout if stdout is not None else sys.stdout,
    )


def _show(stdout: TextIO, text: str) -> None:
    stdout.write(text)
    stdout.flush()


def _next_text(stdin: TextIO) -> str:
    """Return the next line with leading whitespace removed, skipping blank lines."""
    while True:
        line = stdin.readline()
        if not line:
            raise InputExhausted("input ended while waiting for a value")
        text = line.lstrip()
        if text:
            return text


def read_line(prompt: str, stdin: TextIO | None = None, stdout: TextIO | None = None) -> str:
    """Show a prompt and return one line of input without its line ending."""
    inp, out = _streams(stdin, stdout)
    _show(out, prompt)
    line = inp.readline()
    if not line:
        raise InputExhausted("input ended while waiting for a line")
    return line.rstrip("\r\n")


def read_int(
    prompt: str,
    minimum: int,
    maximum: int,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> int:
    """Prompt until an integer within [minimum, maximum] is entered."""
    inp, out = _streams(stdin, stdout)
    while True:
        _show(out, prompt)
        match = _INT_RE.match(_next_text(inp))
        value = int(match.group()) if match else None
        if value is None or not _INT_MIN <= value <= _INT_MAX:
            _show(out, INVALID_NUMBER)
            continue
        if minimum <= value <= maximum:
            return value
        _show(
            out,
            f"Nilai di luar rentang. Masukkan angka antara {minimum} dan {maximum}: ",
        )


def read_float(
    prompt: str,
    minimum: float = 0.0,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> float:
    """Prompt until a number not below minimum is entered."""
    inp, out = _streams(stdin, stdout)
    while True:
        _show(out, prompt)
        match = _FLOAT_RE.match(_next_text(inp))
        value = float(match.group()) if match else None
        if value is None or not math.isfinite(value):
            _show(out, INVALID_NUMBER)
            continue
        if value >= minimum:
            return value
        _show(
            out,
            f"Nilai harus {minimum:g} atau lebih tinggi. Masukkan angka positif: ",
        )