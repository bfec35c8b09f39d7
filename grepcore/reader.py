import logging

from grepcore import scanner
from grepcore.errors import FileReadError
from grepcore.models import FileErrorKind, FileMatches, ScanFailure, ScanOutcome
from grepcore.pattern import CompiledMatcher

logger = logging.getLogger(__name__)

TEXT_ENCODING = "utf-8"


def read_text(path: str) -> str:
    """
    Read the whole file at path and decode it as text.

    Raises:
        FileReadError with the kind of failure (missing, permission,
        not text, anything else). The handle is closed in every case.
    """
    try:
        with open(path, mode="rb") as file:
            data = file.read()

        return data.decode(TEXT_ENCODING)

    except FileNotFoundError as e:
        raise FileReadError(path, FileErrorKind.NOT_FOUND, "No such file or directory") from e
    except PermissionError as e:
        raise FileReadError(path, FileErrorKind.PERMISSION_DENIED, "Permission denied") from e
    except UnicodeDecodeError as e:
        raise FileReadError(path, FileErrorKind.NOT_TEXT,
                            "Has invalid data, likely not a text file") from e
    except OSError as e:
        raise FileReadError(path, FileErrorKind.OTHER, e.strerror or str(e)) from e


def scan_file(
    path: str,
    matcher: CompiledMatcher,
    *,
    show_line_number: bool = False,
    highlight_matches: bool = False,
    max_matches: int | None = None,
    strict_max_matches: bool = False
) -> ScanOutcome:
    try:
        content = read_text(path)
    except FileReadError as e:
        logger.debug("could not read %s: %s", path, e.kind.name)
        return ScanFailure(path=path, kind=e.kind, detail=e.detail)

    lines = scanner.scan_lines(content, matcher,
                               source_path=path,
                               show_line_number=show_line_number,
                               highlight_matches=highlight_matches,
                               max_matches=max_matches,
                               strict_max_matches=strict_max_matches)

    logger.debug("scanned %s: %d matching lines", path, len(lines))
    return FileMatches(path=path, lines=lines)
