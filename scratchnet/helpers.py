"""
Data-provider glue: everything the network needs is two parallel lists,
feature rows and label rows.
"""

import random


def gen_grid_data(size=3):
    """
    Points on a size x size grid, labelled 1 when x + y <= size - 1.

    For size 3:

        1 | 1 | 1
        --+---+--
        1 | 1 | 0
        --+---+--
        1 | 0 | 0

    Each row is [x, y, label].
    """
    rows = []
    for x in range(size):
        for y in range(size):
            rows.append([x, y, 1 if x + y <= size - 1 else 0])
    return rows


def shuffle(rows, rng=random):
    """Shuffled copy of rows; the input list is left untouched."""
    shuffled = rows[:]
    rng.shuffle(shuffled)
    return shuffled


def split_training_test(rows, fraction, shuffle_data=False, rng=random):
    """
    Split rows whose last column is the label into
    (x_train, y_train, x_test, y_test). Labels come back as one-element rows.
    """
    if not 0 <= fraction <= 1:
        raise ValueError(f"fraction must be between 0 and 1, got {fraction}")
    if shuffle_data:
        rows = shuffle(rows, rng)

    cutoff = int(len(rows) * fraction)
    training, test = rows[:cutoff], rows[cutoff:]

    return (
        [row[:-1] for row in training],
        [row[-1:] for row in training],
        [row[:-1] for row in test],
        [row[-1:] for row in test],
    )


def format_table(headers, rows):
    def cell(value):
        if isinstance(value, float):
            return f"{value:.4f}"
        return str(value)

    cells = [[cell(v) for v in row] for row in rows]
    widths = [len(h) for h in headers]
    for row in cells:
        for i, value in enumerate(row):
            widths[i] = max(widths[i], len(value))

    lines = [
        " | ".join(h.ljust(w) for h, w in zip(headers, widths)),
        "-+-".join("-" * w for w in widths),
    ]
    for row in cells:
        lines.append(" | ".join(v.ljust(w) for v, w in zip(row, widths)))
    return "\n".join(lines)


def print_table(headers, rows):
    print(format_table(headers, rows))
