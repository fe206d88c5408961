from fnmatch import fnmatch
from pathlib import Path
from typing import Iterable, List

DEFAULT_MANIFEST_PATTERNS = ("pom.xml", "*.pom")


def is_manifest_file(file_path: Path | str, patterns: Iterable[str] = DEFAULT_MANIFEST_PATTERNS) -> bool:
    """True when the file name looks like a Maven project manifest."""
    name = Path(file_path).name
    return any(fnmatch(name, pattern) for pattern in patterns)


def find_manifests(root: Path, patterns: Iterable[str] = DEFAULT_MANIFEST_PATTERNS) -> List[Path]:
    patterns = list(patterns)
    return sorted(p for p in root.rglob("*") if p.is_file() and is_manifest_file(p, patterns))


def read_manifest(file_path: Path) -> str:
    # newline="" keeps CRLF line endings intact
    with open(file_path, encoding="utf-8", newline="") as f:
        return f.read()


def write_manifest(file_path: Path, content: str) -> None:
    with open(file_path, "w", encoding="utf-8", newline="") as f:
        f.write(content)
