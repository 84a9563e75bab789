"""JSONL helpers for batches of form response records."""

import json
from collections.abc import Callable, Iterable, Iterator
from pathlib import Path
from typing import Any

# Called as on_invalid(line_num, error) for lines that are not valid JSON.
InvalidLineHandler = Callable[[int, json.JSONDecodeError], None]


def read_jsonl(
    path: Path | str,
    on_invalid: InvalidLineHandler | None = None,
) -> Iterator[Any]:
    """Read a JSONL file of response records.

    Blank lines are skipped. Each other line is parsed as-is; records are
    not required to be objects, so callers can report them individually.

    Args:
        path: Path to the JSONL file.
        on_invalid: If given, invalid lines are passed to it and skipped
            instead of aborting the read.

    Raises:
        ValueError: If a line is not valid JSON and no handler is given.
    """
    with open(path) as f:
        for line_num, line in enumerate(f, 1):
            line = line.strip()
            if not line:
                continue
            try:
                record = json.loads(line)
            except json.JSONDecodeError as e:
                if on_invalid is None:
                    raise ValueError(f"Invalid JSON on line {line_num}: {e}") from e
                on_invalid(line_num, e)
                continue
            yield record


def write_jsonl(path: Path | str, records: Iterable[dict[str, Any]]) -> int:
    """Write one JSON object per line, returning how many were written."""
    count = 0
    with open(path, "w") as f:
        for record in records:
            f.write(json.dumps(record, ensure_ascii=False) + "\n")
            count += 1
    return count
