"""JSONL input and output for batch form processing."""

import json
from collections.abc import Callable, Iterable, Iterator
from pathlib import Path
from typing import Any

from pydantic import BaseModel

LineErrorHandler = Callable[[int, str], None]


def read_jsonl(
    path: Path | str,
    on_error: LineErrorHandler | None = None,
) -> Iterator[dict[str, Any]]:
    """Yield each submission from a JSONL file, skipping blank lines.

    Args:
        path: Path to the JSONL file.
        on_error: Called with (line number, message) for a line that is not
            a JSON object; the line is then skipped. Without a handler such
            lines raise.

    Raises:
        ValueError: If a line is not valid JSON or not a JSON object and no
            handler is given.
    """
    with open(path) as f:
        for line_num, line in enumerate(f, 1):
            line = line.strip()
            if not line:
                continue
            try:
                record = json.loads(line)
            except json.JSONDecodeError as e:
                message = f"Invalid JSON on line {line_num}: {e}"
            else:
                if isinstance(record, dict):
                    yield record
                    continue
                message = f"Expected a JSON object on line {line_num}, got {type(record).__name__}"

            if on_error is None:
                raise ValueError(message)
            on_error(line_num, message)


def write_jsonl(path: Path | str, records: Iterable[BaseModel | dict[str, Any]]) -> int:
    """Write models or dicts to a JSONL file, one per line.

    Returns:
        Number of records written.
    """
    count = 0
    with open(path, "w") as f:
        for record in records:
            if isinstance(record, BaseModel):
                f.write(record.model_dump_json() + "\n")
            else:
                f.write(json.dumps(record, ensure_ascii=False, default=str) + "\n")
            count += 1
    return count
