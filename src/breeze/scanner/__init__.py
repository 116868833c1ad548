"""Class candidate scanner: tokenizer plus content discovery."""

from breeze.scanner.content import (
    collect_files,
    expand_braces,
    read_source,
    scan_content,
    scan_files,
)
from breeze.scanner.tokenize import extract_candidates, scan, scan_ordered

__all__ = [
    "collect_files",
    "expand_braces",
    "extract_candidates",
    "read_source",
    "scan",
    "scan_content",
    "scan_files",
    "scan_ordered",
]
