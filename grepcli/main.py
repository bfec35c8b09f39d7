import logging
import sys

from grepcli import args
from grepcore import engine
from grepcore.errors import ConfigError, PatternError
from grepcore.presenter import PROGRAM_NAME

def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(name)s %(levelname)s: %(message)s",
        stream=sys.stderr,
        force=True,
    )

# Parse arguments, run the search, print results and diagnostics, return the exit code.
def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    if not argv:
        print(args.SHORT_USAGE)
        return engine.EXIT_ERROR

    try:
        config = args.parse_args(argv)
    except ConfigError as e:
        print(f"{PROGRAM_NAME}: {e}", file=sys.stderr)
        print(args.SHORT_USAGE, file=sys.stderr)
        return engine.EXIT_USAGE_ERROR

    configure_logging(config.verbose)

    try:
        search_run = engine.run_search(config)
    except PatternError as e:
        print(f"{PROGRAM_NAME}: {e}", file=sys.stderr)
        return engine.EXIT_USAGE_ERROR

    for message in search_run.diagnostics:
        print(message, file=sys.stderr)

    for line in search_run.output_lines:
        print(line)

    return search_run.exit_code

if __name__ == "__main__":
    sys.exit(main())
