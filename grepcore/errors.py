from grepcore.models import FileErrorKind


class GrepError(Exception):
    """Base class for everything the search core raises."""


# Bad or missing command line arguments; nothing has been scanned yet
class ConfigError(GrepError):
    pass


# The pattern does not compile; no target can be scanned without it
class PatternError(GrepError):
    def __init__(self, pattern: str, reason: str):
        super().__init__(f"invalid pattern '{pattern}': {reason}")
        self.pattern = pattern
        self.reason = reason


class FileReadError(GrepError):
    """
    Raised by the reader when a single file cannot be turned into text.
    Local to that file: callers convert it into a ScanFailure and move on.
    """

    def __init__(self, path: str, kind: FileErrorKind, detail: str = ""):
        super().__init__(f"{path}: {detail or kind.name}")
        self.path = path
        self.kind = kind
        self.detail = detail
