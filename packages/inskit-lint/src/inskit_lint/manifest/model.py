from __future__ import annotations

from dataclasses import dataclass

from ..document.parser import normalize_source_path


@dataclass(frozen=True)
class ManifestEntry:
    name: str
    description: str
    file_path: str
    tags: tuple[str, ...]

    @property
    def normalized_path(self) -> str:
        return normalize_source_path(self.file_path)

    def as_row(self) -> dict[str, object]:
        return {
            "name": self.name,
            "description": self.description,
            "filePath": self.file_path,
            "tags": list(self.tags),
        }


@dataclass(frozen=True)
class Manifest:
    """Read-only lookup table over the manifest entries, in file order."""

    entries: tuple[ManifestEntry, ...]
    source: str = ""

    def by_name(self, name: str) -> ManifestEntry | None:
        return next((entry for entry in self.entries if entry.name == name), None)

    def by_path(self, source_path: str) -> ManifestEntry | None:
        wanted = normalize_source_path(source_path)
        return next((entry for entry in self.entries if entry.normalized_path == wanted), None)

    def entry_for(self, name: str, source_path: str) -> ManifestEntry | None:
        return self.by_name(name) or self.by_path(source_path)

    def names(self) -> list[str]:
        return [entry.name for entry in self.entries]
