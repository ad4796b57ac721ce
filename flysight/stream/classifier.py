"""
Line Classifier
===============

Decide whether a line carries content at all.

Blank lines and '#' comment lines are skipped before tokenizing; they
never count toward header detection and never produce a sample.
"""

BOM = '\ufeff'
COMMENT_PREFIX = '#'


def strip_bom(line: str) -> str:
    """Remove a single leading byte-order mark, if present."""
    if line.startswith(BOM):
        return line[1:]
    return line


def is_skippable(line: str) -> bool:
    """True for empty, whitespace-only, BOM-only, or '#'-comment lines."""
    if not strip_bom(line).strip():
        return True
    return line.lstrip(BOM + ' \t').startswith(COMMENT_PREFIX)
