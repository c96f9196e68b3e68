"""
Text rendering of board snapshots.

Draws a framed board with 1-based column numbers on top and row
numbers on the left::

     |123|
    -|---|
    1|./1|
    2|.*.|
    -|---|
"""
import numpy as np


def _separator(label_width: int, width: int) -> str:
    return "-" * label_width + "|" + "-" * width + "|"


def render_board(snapshot: np.ndarray) -> str:
    """
    Render a snapshot from Board.get_snapshot as text.

    Column headers show the last digit of the column number so that
    every column stays one character wide.

    Args:
        snapshot: (height, width) array of display characters.

    Returns:
        Multi-line board drawing without a trailing newline.
    """
    height, width = snapshot.shape
    label_width = len(str(height))
    header = "".join(str((x + 1) % 10) for x in range(width))

    lines = [" " * label_width + "|" + header + "|"]
    lines.append(_separator(label_width, width))
    for y in range(height):
        row = "".join(snapshot[y])
        lines.append(f"{y + 1:>{label_width}}|{row}|")
    lines.append(_separator(label_width, width))
    return "\n".join(lines)
