from enum import Enum
from typing import NamedTuple
from dataclasses import dataclass, field

class FileErrorKind(Enum):
    # Reasons a single file or directory could not be scanned
    NOT_FOUND = 1
    PERMISSION_DENIED = 2
    NOT_TEXT = 3
    OTHER = 4

@dataclass(frozen=True)
class Configuration:
    # Everything one invocation needs, built once by the argument parser
    pattern: str
    targets: tuple[str, ...]
    ignore_case: bool = False
    show_line_number: bool = False
    highlight_matches: bool = False
    recursive: bool = False
    max_matches: int | None = None   # None or 0 means unbounded
    strict_max_matches: bool = False # stop at exactly max_matches instead of one past it
    verbose: bool = False

class MatchLine(NamedTuple):
    # A single matching line, ready for output
    source_path: str
    line_index: int     # 1-based
    raw_text: str       # The line as it appears in the file
    rendered_text: str  # Line-number prefix and highlight markup applied

class FileMatches(NamedTuple):
    # Successful scan of one file (possibly with zero matches)
    path: str
    lines: list[MatchLine]

class ScanFailure(NamedTuple):
    # A file or directory that could not be scanned
    path: str
    kind: FileErrorKind
    detail: str = ""
    is_directory: bool = False

ScanOutcome = FileMatches | ScanFailure

@dataclass
class TraversalReport:
    # Aggregated outcomes, in the order they were discovered
    outcomes: list[ScanOutcome] = field(default_factory=list)

    def add(self, outcome: ScanOutcome) -> None:
        self.outcomes.append(outcome)

    def extend(self, other: "TraversalReport") -> None:
        self.outcomes.extend(other.outcomes)

    def matches(self) -> list[FileMatches]:
        return [o for o in self.outcomes if isinstance(o, FileMatches)]

    def failures(self) -> list[ScanFailure]:
        return [o for o in self.outcomes if isinstance(o, ScanFailure)]

    @property
    def total_matches(self) -> int:
        return sum(len(o.lines) for o in self.matches())

@dataclass
class SearchRun:
    # Everything the front end needs to finish one invocation
    report: TraversalReport
    output_lines: list[str]
    diagnostics: list[str]
    exit_code: int
