"""Candidate tokenizer.

A single pass over the text with a fixed character-class table; no
per-format parsing.  Examples of extracted tokens::

    class="container mx-auto md:p-8"   ->  class, container, mx-auto, md:p-8
    w-[calc(100%_-_2rem)]               ->  w-[calc(100%_-_2rem)]
    use p-4.                            ->  use, p-4., p-4
"""

from __future__ import annotations

import string
from typing import Iterable

__all__ = ["extract_candidates", "scan", "scan_ordered"]

# Characters allowed anywhere in a token.
TOKEN_CHARS = frozenset(string.ascii_letters + string.digits + "-_:/.!%#")

# Additional characters allowed only between brackets.
BRACKET_CHARS = frozenset("(),'\"+*=<>~&@;?")

# Prose punctuation; a token ending in one also yields a stripped copy.
TRAILING = ".,:"

_OPEN = "["
_CLOSE = "]"

# Resumes allowed within the text spanned by one unbalanced token.
MAX_RESUMES = 32


def _has_letter(token: str) -> bool:
    return any(ch.isalpha() for ch in token)


def _accept(token: str, out: list[str]) -> None:
    if not _has_letter(token):
        return
    out.append(token)
    stripped = token.rstrip(TRAILING + "!")
    if stripped != token and token[-1] in TRAILING and _has_letter(stripped):
        out.append(stripped)


def extract_candidates(text: str) -> list[str]:
    """Return every candidate token in *text*, in order of appearance.

    A token left with an open bracket at a boundary, or holding a stray
    closing bracket, is dropped; scanning resumes just after its first
    opening bracket so the tokens around it are still found, at most
    ``MAX_RESUMES`` times per span of unbalanced text.  Tokens that
    start with a bracket (``['p-4','m-2']`` in a script) are also searched
    inside.
    """
    candidates: list[str] = []
    start = -1
    first_open = -1
    depth = 0
    broken = False
    horizon = -1
    resumes = 0
    i = 0
    length = len(text)
    while i <= length:
        ch = text[i] if i < length else ""
        if ch == _OPEN:
            if start < 0:
                start = i
            if first_open < 0:
                first_open = i
            depth += 1
        elif ch == _CLOSE and start >= 0:
            depth -= 1
            if depth < 0:
                broken = True
                depth = 0
        elif ch and (ch in TOKEN_CHARS or (depth > 0 and ch in BRACKET_CHARS)):
            if start < 0:
                start = i
        elif start >= 0:
            token = text[start:i]
            resume = -1
            if depth == 0 and not broken:
                _accept(token, candidates)
                if token.startswith(_OPEN):
                    candidates.extend(extract_candidates(token[1:]))
            elif first_open >= 0:
                if i > horizon:
                    horizon, resumes = i, 0
                resumes += 1
                if resumes <= MAX_RESUMES:
                    resume = first_open + 1
            start, first_open, depth, broken = -1, -1, 0, False
            if resume >= 0:
                i = resume
                continue
        i += 1
    return candidates


def scan_ordered(source_texts: Iterable[str]) -> list[str]:
    """Distinct candidates in first-occurrence order (source, then position)."""
    seen: set[str] = set()
    ordered: list[str] = []
    for text in source_texts:
        for candidate in extract_candidates(text):
            if candidate not in seen:
                seen.add(candidate)
                ordered.append(candidate)
    return ordered


def scan(source_texts: Iterable[str]) -> set[str]:
    """The set of distinct candidates across *source_texts*."""
    return set(scan_ordered(source_texts))
