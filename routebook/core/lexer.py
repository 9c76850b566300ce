"""Line scanner for route documents.

A line is read left to right as a sequence of three token classes:

- comment: optional whitespace then ``#`` through end of line; dropped.
- literal: a run of characters containing neither ``{`` nor ``#``.
- action group: ``{...}`` closed by the first ``}``; the interior must be
  non-empty and is split on ``|``. Braces do not nest and comments are not
  recognised inside a group.

A ``{`` that cannot open a group (no closing brace, or ``{}``) is skipped on
its own and scanning resumes at the next character.
"""
from __future__ import annotations
import re
from typing import List, Union
from .actions import ParsedAction

LineToken = Union[str, ParsedAction]

_NEWLINE = re.compile(r"\r\n|\r|\n")


def split_lines(document: str) -> List[str]:
    """Split on any newline convention (CRLF, CR, LF)."""
    return _NEWLINE.split(document)


def _comment_starts_at(text: str, i: int) -> bool:
    j = i
    while j < len(text) and text[j].isspace():
        j += 1
    return j < len(text) and text[j] == "#"


def tokenize_line(text: str) -> List[LineToken]:
    parts: List[LineToken] = []
    i = 0
    n = len(text)
    while i < n:
        if _comment_starts_at(text, i):
            break
        ch = text[i]
        if ch == "{":
            close = text.find("}", i + 2)
            if close == -1:
                i += 1
                continue
            parts.append(text[i + 1:close].split("|"))
            i = close + 1
            continue
        j = i
        while j < n and text[j] not in "{#":
            j += 1
        parts.append(text[i:j])
        i = j
    return parts
