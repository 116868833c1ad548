"""Content discovery and parallel file scanning."""

from __future__ import annotations

import glob
import logging
import os
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Iterable, Sequence

from breeze.config import RawContent
from breeze.errors import ScanError
from breeze.scanner.tokenize import extract_candidates

logger = logging.getLogger(__name__)


def expand_braces(pattern: str) -> list[str]:
    """Expand shell-style braces: ``src/*.{html,js}`` -> two patterns.

    Nested groups expand left to right; unmatched braces are kept literally.
    """
    start = pattern.find("{")
    if start < 0:
        return [pattern]
    depth = 0
    parts: list[str] = []
    last = start + 1
    for i in range(start, len(pattern)):
        ch = pattern[i]
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                parts.append(pattern[last:i])
                head, tail = pattern[:start], pattern[i + 1 :]
                expanded: list[str] = []
                for part in parts:
                    expanded.extend(expand_braces(head + part + tail))
                return expanded
        elif ch == "," and depth == 1:
            parts.append(pattern[last:i])
            last = i + 1
    return [pattern]


def _glob(pattern: str, base_dir: Path) -> set[Path]:
    matches: set[Path] = set()
    for expanded in expand_braces(pattern):
        full = expanded if os.path.isabs(expanded) else str(base_dir / expanded)
        for match in glob.glob(full, recursive=True):
            path = Path(match)
            if path.is_file():
                matches.add(path.resolve())
    return matches


def collect_files(patterns: Iterable[str], base_dir: Path | str = ".") -> list[Path]:
    """Resolve content globs into a sorted, de-duplicated list of files.

    Patterns starting with ``!`` remove matches; order of patterns does not
    matter.
    """
    root = Path(base_dir)
    included: set[Path] = set()
    excluded: set[Path] = set()
    for pattern in patterns:
        if pattern.startswith("!"):
            excluded |= _glob(pattern[1:], root)
        else:
            matched = _glob(pattern, root)
            if not matched:
                logger.debug("Content pattern %r matched no files", pattern)
            included |= matched
    files = sorted(included - excluded)
    logger.debug("Collected %d content files", len(files))
    return files


def read_source(path: Path | str) -> str:
    """Read a content file as UTF-8 text; undecodable bytes are replaced."""
    try:
        return Path(path).read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        raise ScanError(f"Cannot read {path}: {exc.strerror or exc}", path=str(path)) from exc


def _scan_one(path: Path) -> list[str]:
    return extract_candidates(read_source(path))


def scan_files(paths: Sequence[Path | str], workers: int = 4) -> list[str]:
    """Scan files on a thread pool; distinct candidates in canonical file order.

    Raises :class:`ScanError` for the first unreadable file in path order.
    """
    ordered = [Path(p) for p in paths]
    if not ordered:
        return []
    with ThreadPoolExecutor(max_workers=max(1, min(workers, len(ordered)))) as pool:
        # map() yields in submission order, independent of completion order.
        per_file = list(pool.map(_scan_one, ordered))
    return _merge(per_file)


def scan_content(
    entries: Iterable[str | RawContent], base_dir: Path | str = ".", workers: int = 4
) -> list[str]:
    """Scan a configured content list: glob patterns plus raw snippets.

    Files come first in canonical order, raw snippets after them in
    configuration order.
    """
    patterns: list[str] = []
    raw: list[str] = []
    for entry in entries:
        if isinstance(entry, RawContent):
            raw.append(entry.text)
        else:
            patterns.append(entry)
    files = collect_files(patterns, base_dir) if patterns else []
    from_files = scan_files(files, workers)
    return _merge([from_files, *(extract_candidates(text) for text in raw)])


def _merge(chunks: Iterable[list[str]]) -> list[str]:
    seen: set[str] = set()
    merged: list[str] = []
    for chunk in chunks:
        for candidate in chunk:
            if candidate not in seen:
                seen.add(candidate)
                merged.append(candidate)
    return merged
