import logging
import re
from dataclasses import dataclass

from grepcore.errors import PatternError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CompiledMatcher:
    # Compiled once per invocation and shared by every line of every file
    pattern: str
    ignore_case: bool
    compiled_re: re.Pattern

    def search(self, line: str) -> bool:
        if self.compiled_re.search(line):
            return True

        return False

    def sub(self, repl, line: str) -> str:
        return self.compiled_re.sub(repl, line)


def compile_pattern(pattern: str, *, ignore_case: bool = False) -> CompiledMatcher:
    if not pattern:
        raise PatternError(pattern, "empty pattern")

    # The case modifier goes into the flags so the user's pattern stays untouched
    flags = re.IGNORECASE if ignore_case else 0

    try:
        compiled_re = re.compile(pattern, flags)
    except re.error as e:
        raise PatternError(pattern, str(e)) from e

    logger.debug("compiled pattern %r (ignore_case=%s)", pattern, ignore_case)
    return CompiledMatcher(pattern=pattern, ignore_case=ignore_case, compiled_re=compiled_re)
