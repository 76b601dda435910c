from collections.abc import Sequence

from sheetfinder.records.models import Record
from sheetfinder.text.normalize import prettify_label

SUMMARY_DEFAULT_FIELDS = 6
MAX_CHIPS = 4
MAX_CHIP_LENGTH = 26


def pick_title(record: Record, labels: Sequence[str]) -> str:
    """First non-empty value among the first three columns, else any non-empty value."""
    for label in (*labels[:3], *labels):
        value = record.get(label).strip()
        if value:
            return value
    return ""


def build_chips(record: Record, labels: Sequence[str]) -> list[str]:
    """Title plus up to three other short values."""
    title = pick_title(record, labels)
    chips = [title] if title else []
    for label in labels:
        if len(chips) >= MAX_CHIPS:
            break
        value = record.get(label).strip()
        if not value or value == title or len(value) > MAX_CHIP_LENGTH:
            continue
        chips.append(value)
    return chips


def build_summary(
    record: Record,
    labels: Sequence[str],
    summary_keys: Sequence[str] = (),
) -> str:
    """Multi-line "Label: value" text.

    With *summary_keys* only those fields are used, in that order. Otherwise
    the first six non-empty selected fields.
    """
    if summary_keys:
        lines = [
            f"{prettify_label(key)}: {record.get(key).strip()}"
            for key in summary_keys
            if record.get(key).strip()
        ]
        return "\n".join(lines)

    lines: list[str] = []
    for label in labels:
        value = record.get(label).strip()
        if not value:
            continue
        lines.append(f"{prettify_label(label)}: {value}")
        if len(lines) >= SUMMARY_DEFAULT_FIELDS:
            break
    return "\n".join(lines)
