"""Filesystem implementation for infrastructure.

Usage example:
    from pathlib import Path

    from mentor_matching.infrastructure.io.filesystem import LocalFileSystem

    fs = LocalFileSystem()
    payload = fs.read_json(Path("data/mentors.json"))
"""

from __future__ import annotations

import json
from pathlib import Path
from typing_extensions import override

import pandas as pd

from ...protocols import FileSystem
from .validation import parse_json_document


class LocalFileSystem(FileSystem):
    """Local filesystem implementation."""

    @override
    def read_json(self, path: Path) -> object:
        return parse_json_document(path.read_text(encoding="utf-8"))

    @override
    def write_json(self, data: object, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")

    @override
    def read_text(self, path: Path) -> str:
        return path.read_text(encoding="utf-8")

    @override
    def write_text(self, content: str, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")

    @override
    def write_csv(self, df: pd.DataFrame, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        df.to_csv(path, index=False)

    @override
    def exists(self, path: Path) -> bool:
        return path.exists()

    @override
    def mkdir(self, path: Path, parents: bool = True) -> None:
        path.mkdir(parents=parents, exist_ok=True)
