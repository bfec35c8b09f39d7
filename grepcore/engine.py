import logging
from functools import partial

from grepcore import presenter, reader, walker
from grepcore.models import Configuration, SearchRun, TraversalReport
from grepcore.pattern import CompiledMatcher, compile_pattern

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_USAGE_ERROR = 2

def make_scan_function(config: Configuration, matcher: CompiledMatcher):
    return partial(reader.scan_file,
                   matcher=matcher,
                   show_line_number=config.show_line_number,
                   highlight_matches=config.highlight_matches,
                   max_matches=config.max_matches,
                   strict_max_matches=config.strict_max_matches)

# Scan every target as a plain file, in the order given
def scan_targets(targets: tuple[str, ...], scan_fn) -> TraversalReport:
    report = TraversalReport()

    for target in targets:
        report.add(scan_fn(target))

    return report

# Walk every target as a directory root; a bad root only ends its own subtree
def walk_targets(targets: tuple[str, ...], scan_fn) -> TraversalReport:
    report = TraversalReport()

    for target in targets:
        report.extend(walker.walk_directory(target, scan_fn))

    return report

def run_search(config: Configuration) -> SearchRun:
    """
    Run one invocation described by config.

    The matcher is compiled once up front; PatternError propagates to the
    caller since nothing can be scanned without it. File and directory
    failures are collected into the report and turned into diagnostics.

    Modes:
      - recursive: every target is walked as a directory root
      - one target: single-file output (matches joined, empty line if none)
      - several targets: each scanned as a file, grouped under path headers
    """
    matcher = compile_pattern(config.pattern, ignore_case=config.ignore_case)
    scan_fn = make_scan_function(config, matcher)

    if config.recursive:
        report = walk_targets(config.targets, scan_fn)
        output_lines = presenter.present_multi(report)
    elif len(config.targets) == 1:
        report = scan_targets(config.targets, scan_fn)
        output_lines = presenter.present_single(report.outcomes[0])
    else:
        report = scan_targets(config.targets, scan_fn)
        output_lines = presenter.present_multi(report)

    diagnostics = presenter.format_failures(report)

    # Recursive mode keeps going past unreadable entries; plain file targets must all be readable
    if report.failures() and not config.recursive:
        exit_code = EXIT_ERROR
    else:
        exit_code = EXIT_SUCCESS

    logger.debug("search finished: %d matches, %d failures",
                 report.total_matches, len(report.failures()))

    return SearchRun(report=report, output_lines=output_lines,
                     diagnostics=diagnostics, exit_code=exit_code)
