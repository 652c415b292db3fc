"""Truncating highlighted strings to a display width."""

from __future__ import annotations

from collections.abc import Sequence

from wcwidth import wcwidth

ELLIPSIS = "…"
_ELLIPSIS_WIDTH = 1

Range = tuple[int, int]


def _char_width(c: str) -> int:
    return max(wcwidth(c), 0)


def _shift_ranges(ranges: Sequence[Range], skipped: int) -> list[Range]:
    shifted = (
        (
            max(start - skipped, 0) + _ELLIPSIS_WIDTH,
            max(end - skipped, 0) + _ELLIPSIS_WIDTH,
        )
        for start, end in ranges
    )
    return [(start, end) for start, end in shifted if start != end]


def truncate_highlighted_string(
    s: str, highlighted_ranges: Sequence[Range], max_width: int
) -> tuple[str, list[Range]]:
    """Truncate ``s`` to ``max_width`` columns, keeping highlights visible.

    Truncates from the end, the start or both sides depending on where the
    highlighted ranges lie, and shifts the ranges to match the result.
    Ranges are character indices, end-exclusive, sorted and non-overlapping.
    Wide characters such as CJK glyphs count for their display width.
    """
    widths = [_char_width(c) for c in s]
    str_width = sum(widths)

    if str_width <= max_width:
        return s, list(highlighted_ranges)

    last_end = highlighted_ranges[-1][1] if highlighted_ranges else 0
    last_highlighted_index = max(last_end - 1, 0)
    width_to_last_highlight = sum(widths[: last_highlighted_index + 1])

    if not highlighted_ranges or width_to_last_highlight < max_width:
        budget = max(max_width - _ELLIPSIS_WIDTH, 0)
        cumulative = 0
        kept = 0
        for width in widths:
            cumulative += width
            if cumulative > budget:
                break
            kept += 1
        return s[:kept] + ELLIPSIS, list(highlighted_ranges)

    start_width_offset = max(str_width - max_width, 0) + _ELLIPSIS_WIDTH
    if width_to_last_highlight > start_width_offset:
        remaining = str_width
        skipped = 0
        for width in widths:
            if remaining < max_width:
                break
            remaining -= width
            skipped += 1
        return ELLIPSIS + s[skipped:], _shift_ranges(highlighted_ranges, skipped)

    inner_width = max(max_width - 2 * _ELLIPSIS_WIDTH, 0)
    start_width_offset = max(width_to_last_highlight - inner_width, 0)
    cumulated = 0
    skipped = 0
    for width in widths:
        if cumulated >= start_width_offset:
            break
        cumulated += width
        skipped += 1
    return (
        ELLIPSIS + s[skipped : skipped + inner_width] + ELLIPSIS,
        _shift_ranges(highlighted_ranges, skipped),
    )