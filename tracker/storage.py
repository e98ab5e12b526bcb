import json
import os
from typing import Any, List

from .record import COUNTERS, MetricRecord


def _reject_constant(name: str):
    raise ValueError(f"invalid JSON constant: {name}")


def ensure_parent_dir(path: str) -> None:
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)


def load_log(path: str) -> List[Any]:
    """Read the JSON array at `path`.

    A missing file, unreadable content or anything that is not an array
    gives an empty log.
    """
    ensure_parent_dir(path)

    if not os.path.exists(path):
        return []

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f, parse_constant=_reject_constant)
    except (OSError, ValueError):
        return []

    if not isinstance(data, list):
        return []
    return data


def save_log(path: str, log: List[Any]) -> None:
    text = json.dumps(log, ensure_ascii=False, indent=2, allow_nan=False) + "\n"
    with open(path, "w", encoding="utf-8") as f:
        f.write(text)


def same_counters(last: Any, record: MetricRecord) -> bool:
    if not isinstance(last, dict):
        return False
    # bool is an int subclass; a stored true must not match 1
    return all(
        type(last.get(k)) is not bool and last.get(k) == getattr(record, k)
        for k in COUNTERS
    )


def append_if_changed(path: str, log: List[Any], record: MetricRecord) -> bool:
    if log and same_counters(log[-1], record):
        return False

    log.append(record.model_dump())
    save_log(path, log)
    return True
