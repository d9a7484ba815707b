"""Utility functions for CLI output."""

from typing import Sequence

from common.constants import DISPLAY_TIMESTAMP_FORMAT
from vfs.types import File, Folder

COLUMN_SEPARATOR = " | "


def format_table(headers: Sequence[str], rows: Sequence[Sequence[str]]) -> str:
    """
    Render rows as a left-aligned text table.

    Each column is as wide as its longest cell, header included. A dashed
    rule separates the header from the rows.

    Args:
        headers: Column titles
        rows: Cell values, one sequence per row

    Returns:
        Table text without a trailing newline
    """
    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(cell))

    def render(cells: Sequence[str]) -> str:
        return COLUMN_SEPARATOR.join(
            cell.ljust(width) for cell, width in zip(cells, widths)
        ).rstrip()

    rule = "-" * (sum(widths) + len(COLUMN_SEPARATOR) * (len(widths) - 1))
    lines = [render(headers), rule]
    lines.extend(render(row) for row in rows)
    return "\n".join(lines)


def format_folders(folders: Sequence[Folder]) -> str:
    return format_table(
        ["Name", "Description", "Created At", "User Name"],
        [
            [f.name, f.description, f.created_at.strftime(DISPLAY_TIMESTAMP_FORMAT), f.username]
            for f in folders
        ],
    )


def format_files(files: Sequence[File]) -> str:
    return format_table(
        ["Name", "Description", "Created At", "Folder", "User Name"],
        [
            [
                f.name,
                f.description,
                f.created_at.strftime(DISPLAY_TIMESTAMP_FORMAT),
                f.folder_name,
                f.username,
            ]
            for f in files
        ],
    )
