"""Column width allocation.

Splits a display-width budget across table columns in proportion to each
column's content width. A column whose content fits inside its proportional
share, or inside an even split of what is still unassigned, keeps its content
width; the space it leaves is shared out again among the remaining columns
until nothing changes. No column ends up narrower than its widest glyph.
"""

from __future__ import annotations

import logging

from csvpretty.wrap import WrapMode

logger = logging.getLogger(__name__)

# " " + content + " " + "│"
CELL_OVERHEAD = 3
# digits + "  │"
GUTTER_OVERHEAD = 3


def overhead(column_count: int, gutter_width: int = 0) -> int:
    """Return the per-line characters that are not cell content.

    Borders are ``overhead(...) + sum(widths) - 1`` columns wide (the last
    column has no trailing separator), so a table allocated against the
    terminal width always leaves the final terminal column free.
    """
    total = column_count * CELL_OVERHEAD
    if gutter_width > 0:
        total += gutter_width + GUTTER_OVERHEAD
    return total


def proportional_shares(budget: int, weights: list[int]) -> list[int]:
    """Apportion *budget* over *weights* by the largest-remainder method.

    Every share is at least 1. Units left over after flooring go to the
    largest fractional remainders, ties to the lowest index. Units taken back
    to honour the minimum come from the smallest remainders, ties to the
    highest index. The shares sum to *budget* whenever
    ``budget >= len(weights)``.
    """
    n = len(weights)
    if n == 0:
        return []

    total = sum(weights)
    shares: list[int] = []
    remainders: list[int] = []
    for w in weights:
        quotient, remainder = divmod(budget * w, total)
        shares.append(max(quotient, 1))
        remainders.append(remainder)

    diff = budget - sum(shares)

    if diff > 0:
        order = sorted(range(n), key=lambda i: (-remainders[i], i))
        for k in range(diff):
            shares[order[k % n]] += 1
    elif diff < 0:
        order = sorted(range(n), key=lambda i: (remainders[i], -i))
        while diff < 0:
            progressed = False
            for i in order:
                if diff == 0:
                    break
                if shares[i] > 1:
                    shares[i] -= 1
                    diff += 1
                    progressed = True
            if not progressed:
                break

    return shares


def allocate(
    content_widths: list[int],
    mode: WrapMode,
    total_budget: int | None,
    min_widths: list[int] | None = None,
) -> list[int]:
    """Compute the final width of every column.

    Without a budget (or in ``none`` mode) each column is as wide as its
    content. With a budget the widths sum to exactly
    ``max(total_budget, sum(minimums))``. A column is never narrower than its
    entry in *min_widths* (at least 1, at most its content width), so a wide
    glyph always fits its column. When every column fits, the spare width
    goes to the last column.

    A column keeps its content width when that fits inside its proportional
    share or inside the average of what is left per open column; the rest
    share the remainder proportionally.
    """
    weights = [max(w, 1) for w in content_widths]
    if total_budget is None or mode == "none" or not weights:
        return weights

    if min_widths is None:
        mins = [1] * len(weights)
    else:
        mins = [min(max(m, 1), w) for m, w in zip(min_widths, weights)]

    budget = max(total_budget, sum(mins))
    widths = [0] * len(weights)
    open_cols = list(range(len(weights)))
    remaining = budget

    while open_cols:
        shares = proportional_shares(remaining, [weights[i] for i in open_cols])
        average = remaining // len(open_cols)
        fitted = {
            i for i, share in zip(open_cols, shares) if weights[i] <= max(share, average)
        }

        if not fitted:
            for i, share in zip(open_cols, shares):
                widths[i] = share
            break

        for i in fitted:
            widths[i] = weights[i]
            remaining -= weights[i]
        open_cols = [i for i in open_cols if i not in fitted]

    leftover = budget - sum(widths)
    if leftover > 0:
        widths[-1] += leftover

    _raise_to_minimums(widths, mins)
    logger.debug("allocated widths %s from content %s (budget %d)", widths, content_widths, budget)
    return widths


def _raise_to_minimums(widths: list[int], mins: list[int]) -> None:
    """Lift columns below their minimum, one unit at a time.

    Each unit comes from the column with the most room above its own
    minimum, ties to the highest index. The total is unchanged.
    """
    for i, minimum in enumerate(mins):
        while widths[i] < minimum:
            donor = max(range(len(widths)), key=lambda j: (widths[j] - mins[j], j))
            if widths[donor] <= mins[donor]:
                return
            widths[donor] -= 1
            widths[i] += 1
