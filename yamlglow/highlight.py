"""Colour YAML text line by line with ANSI escape sequences."""

from __future__ import annotations

from typing import Iterable, Iterator

from yamlglow.lines import YamlLine

_RESET = "\x1b[0m"
_KEY = "\x1b[96m"
_TEXT = "\x1b[33m"
_NUMBER = "\x1b[32m"
_COMMENT = "\x1b[38;5;245m"
_BLOCK = "\x1b[38;5;251m"
_INVALID = "\x1b[30;101m"

_MAX_LINE_BYTES = 64 * 1024
_STOP_LINE = "EOF"


def _paint(style: str, text: str) -> str:
    return f"{style}{text}{_RESET}"


def _scan(stream: Iterable[str]) -> Iterator[str]:
    """Yield lines without their terminator, stopping at an over-long line."""
    for chunk in stream:
        line = chunk[:-1] if chunk.endswith("\n") else chunk
        if len(line.encode("utf-8", "surrogateescape")) >= _MAX_LINE_BYTES:
            return
        if line.endswith("\r"):
            line = line[:-1]
        yield line


def _format_pair(line: YamlLine) -> str:
    if line.is_comment():
        return f"{_paint(_COMMENT, line.key)} {_paint(_COMMENT, line.value)}\n"
    if line.value_is_number_or_ip() or line.value_is_boolean():
        value_style = _NUMBER
    else:
        value_style = _TEXT
    return f"{_paint(_KEY, line.key)}: {_paint(value_style, line.value)}\n"


def _format_other(line: YamlLine) -> str:
    if line.is_url():
        style = _TEXT
    elif line.is_comment():
        line.is_key_value()
        return f"{_paint(_COMMENT, line.key)} {_paint(_COMMENT, line.value)}\n"
    elif line.is_element_of_list():
        style = _TEXT
    else:
        style = _INVALID
    return _paint(style, line.raw) + "\n"


def highlight(stream: Iterable[str]) -> str:
    """Return the highlighted text of the YAML lines read from ``stream``.

    Blank lines are printed straight to standard output instead of being
    added to the result. A line reading exactly ``EOF`` ends the input.
    """
    pieces: list[str] = []
    in_block = False
    block_indent = 0

    for raw in _scan(stream):
        if raw == _STOP_LINE:
            break
        line = YamlLine(raw=raw)

        if in_block and line.indentation_spaces() > block_indent:
            pieces.append(_paint(_BLOCK, line.raw) + "\n")
        elif line.is_key_value():
            pieces.append(_format_pair(line))
            in_block = line.value_contains_chomping_indicator()
            if in_block:
                block_indent = line.indentation_spaces()
        elif not line.is_empty_line():
            pieces.append(_format_other(line))
            in_block = False
        else:
            print(line.raw)

    return "".join(pieces)