"""Shared fixtures for scrobbler tests."""

from collections.abc import Callable
from pathlib import Path

import pytest

from samples import HEADER


@pytest.fixture
def write_log(tmp_path: Path) -> Callable[..., Path]:
    """Write a .scrobbler.log with the standard header followed by ``lines``."""

    def _write(*lines: str, header: str = HEADER, name: str = ".scrobbler.log") -> Path:
        path = tmp_path / name
        path.write_text(header + "".join(f"{line}\n" for line in lines), encoding="utf-8")
        return path

    return _write
