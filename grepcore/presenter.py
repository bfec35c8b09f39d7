import re

from grepcore.models import FileMatches, ScanFailure, ScanOutcome, TraversalReport

PROGRAM_NAME = "minigrep"

_TRAVERSAL_PREFIX_RE = re.compile(r"^(?:\.{1,2}[/\\])+")

# Drop leading "./", ".\" and "../" markers from a path shown as a header
def display_path(path: str) -> str:
    return _TRAVERSAL_PREFIX_RE.sub("", path)

def join_rendered(outcome: FileMatches) -> str:
    return "\n".join(line.rendered_text for line in outcome.lines)

def present_single(outcome: ScanOutcome) -> list[str]:
    """
    Output lines for single-file mode.

    All matches are joined into one block. A file with no matches still
    produces one empty line; a failure produces nothing here, not even
    that empty line, because it is reported as a diagnostic instead.
    """
    if isinstance(outcome, ScanFailure):
        return []

    return [join_rendered(outcome)]

def present_multi(report: TraversalReport) -> list[str]:
    output_lines: list[str] = []

    for outcome in report.matches():
        if not outcome.lines:
            continue

        output_lines.append(display_path(outcome.path))
        output_lines.append(join_rendered(outcome))

    return output_lines

def format_failure(failure: ScanFailure, *, program: str = PROGRAM_NAME) -> str:
    reason = failure.detail or failure.kind.name.lower().replace("_", " ")
    return f"{program}: {failure.path}: {reason}"

def format_failures(report: TraversalReport, *, program: str = PROGRAM_NAME) -> list[str]:
    return [format_failure(failure, program=program) for failure in report.failures()]
