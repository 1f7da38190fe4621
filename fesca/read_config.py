"""Lookup of "key: value" entries in simple text configuration files."""

from __future__ import annotations

from pathlib import Path


def read_config(path: str | Path, name: str) -> str | None:
    """Return the trimmed value of the first line whose key equals name.

    Returns None if the file cannot be opened or no line matches. Lines that
    are not valid UTF-8 are skipped.
    """
    try:
        with open(path, "rb") as handle:
            raw = handle.read()
    except OSError:
        return None

    for raw_line in raw.split(b"\n"):
        if raw_line.endswith(b"\r"):
            raw_line = raw_line[:-1]
        try:
            line = raw_line.decode("utf-8")
        except UnicodeDecodeError:
            continue
        key, sep, value = line.strip().partition(":")
        if sep and key.strip() == name:
            return value.strip()
    return None