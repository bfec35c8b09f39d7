import re

from grepcore.models import MatchLine
from grepcore.pattern import CompiledMatcher

HIGHLIGHT_START = "\x1b[31m"
HIGHLIGHT_END = "\x1b[0m"

# Split on "\n" only; a trailing newline leaves one empty last line and "\r" stays in the text
def split_lines(content: str) -> list[str]:
    return content.split("\n")

def _limit_reached(collected: int, max_matches: int | None, strict: bool) -> bool:
    if not max_matches or max_matches <= 0:
        return False

    if strict:
        return collected >= max_matches

    # Legacy boundary: one match past the limit is collected before stopping
    return collected > max_matches

def _wrap_match(match: re.Match) -> str:
    matched_text = match.group(0)
    if not matched_text:
        return matched_text

    return f"{HIGHLIGHT_START}{matched_text}{HIGHLIGHT_END}"

def highlight_line(line: str, matcher: CompiledMatcher) -> str:
    return matcher.sub(_wrap_match, line)

def render_line(line: str, line_index: int, matcher: CompiledMatcher, *,
                show_line_number: bool, highlight_matches: bool) -> str:
    prefix = f"{line_index}:" if show_line_number else ""
    body = highlight_line(line, matcher) if highlight_matches else line

    return f"{prefix}{body}"

def scan_lines(
    content: str,
    matcher: CompiledMatcher,
    *,
    source_path: str = "",
    show_line_number: bool = False,
    highlight_matches: bool = False,
    max_matches: int | None = None,
    strict_max_matches: bool = False
) -> list[MatchLine]:
    """
    Return the matching lines of content, in file order.

    Line indexes are 1-based. Each MatchLine keeps the untouched line in
    raw_text and the display form (line-number prefix, highlight markup)
    in rendered_text.
    """
    matching_lines_list: list[MatchLine] = []

    for i, line in enumerate(split_lines(content), start=1):
        if _limit_reached(len(matching_lines_list), max_matches, strict_max_matches):
            break

        if not matcher.search(line):
            continue

        rendered_text = render_line(line, i, matcher,
                                    show_line_number=show_line_number,
                                    highlight_matches=highlight_matches)

        matching_lines_list.append(MatchLine(source_path=source_path, line_index=i,
                                             raw_text=line, rendered_text=rendered_text))

    return matching_lines_list
