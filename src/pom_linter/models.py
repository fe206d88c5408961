from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterator, List, Optional


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"
    STYLE = "style"
    INFO = "info"


@dataclass(frozen=True)
class Span:
    """Half-open range [start, end) of character offsets in a document"""

    start: int
    end: int

    def overlaps(self, other: "Span") -> bool:
        return self.start < other.end and other.start < self.end


@dataclass(frozen=True)
class DependencyRecord:
    """One <dependency> entry and its exact location in the source text"""

    span: Span
    text: str
    group_id: str = ""
    artifact_id: str = ""
    line: int = 0

    @property
    def coordinates(self) -> str:
        return f"{self.group_id}:{self.artifact_id}"


@dataclass
class DependencyList:
    """Dependency records of a manifest, in document order"""

    records: List[DependencyRecord] = field(default_factory=list)
    container: Optional[Span] = None
    container_line: int = 0

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[DependencyRecord]:
        return iter(self.records)

    def __getitem__(self, index: int) -> DependencyRecord:
        return self.records[index]


@dataclass(frozen=True)
class Replacement:
    """Overwrite `span` of the original document with `text`"""

    span: Span
    text: str


@dataclass
class InternalIssue:
    """Internal representation of a linting issue"""

    file_path: Path
    line: int
    rule_id: str
    message: str
    severity: str  # 'error', 'warning', 'style', 'info'
    auto_fixable: bool
    context: str | None = None
    message_key: str | None = None


@dataclass
class FixResult:
    source: str
    modified: bool
    replacements: int = 0
