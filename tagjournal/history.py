"""Read side: load partitions, filter by month and render newest first."""

import logging

from tagjournal.tags import split_lines

logger = logging.getLogger(__name__)

FAILED_KEY = "_"
FAILED_MESSAGE = "Failed to read history."


def all_history(store) -> list[tuple[str, str]]:
    """Every partition in the store, or a single placeholder pair if reading fails."""
    try:
        return store.list_partitions()
    except OSError as exc:
        logger.warning("Failed to read history from %s: %s", store.log_dir, exc)
        return [(FAILED_KEY, FAILED_MESSAGE)]


def history_for(store, year: int, month: int) -> list[tuple[str, str]]:
    wanted = f"{year}_{month}"
    return [(key, contents) for key, contents in all_history(store) if key == wanted]


def parse_partition_key(key: str) -> tuple[int, int] | None:
    """``"2024_3"`` -> ``(2024, 3)``; None for anything that is not a month key."""
    year, sep, month = key.partition("_")
    if not sep or not (year + month).isascii() or not year.isdigit() or not month.isdigit():
        return None
    return int(year), int(month)


def _sort_key(pair):
    parsed = parse_partition_key(pair[0])
    if parsed is None:
        # unparseable keys go after every month partition
        return (0, 0, 0, pair[0])
    return (1, parsed[0], parsed[1], pair[0])


def render(pairs) -> str:
    """Newest month first, newest entry first within each month."""
    blocks = []
    for key, contents in sorted(pairs, key=_sort_key, reverse=True):
        lines = split_lines(contents)
        lines.reverse()
        blocks.append(f"{key}:\n" + "\n".join(lines))
    return "\n".join(blocks)
