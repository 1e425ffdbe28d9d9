from __future__ import annotations

from pathlib import Path

ENTRY_DOCUMENT = "index.html"


class SinglePageApp:
    """Maps request paths onto files under ``directory``, falling back to the entry document."""

    def __init__(self, directory: Path) -> None:
        self.directory = Path(directory).resolve()
        self.entry = self.directory / ENTRY_DOCUMENT

    def resolve(self, path: str) -> Path:
        candidate = (self.directory / path.lstrip("/")).resolve()
        if candidate.is_file() and candidate.is_relative_to(self.directory):
            return candidate
        return self.entry
