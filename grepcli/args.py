import argparse
import sys

from grepcore.errors import ConfigError
from grepcore.models import Configuration
from grepcore.presenter import PROGRAM_NAME

__version__ = "1.1.0"

SHORT_USAGE = (f"Usage: {PROGRAM_NAME} [OPTION]... PATTERN [FILE]...\n"
               f"Try '{PROGRAM_NAME} --help' for more information")

HELP_TEXT = f"""Usage: {PROGRAM_NAME} [OPTION]... PATTERN [FILE]...
Search for PATTERN in each FILE.
PATTERN is a Python regular expression.
Example: {PROGRAM_NAME} -i 'hello world' menu.h main.c

Regexp selection and interpretation:
  -i, --ignore-case         ignore case distinctions

Miscellaneous:
  -V, --version             display version information and exit
      --help                display this help text and exit
  -v, --verbose             log what is being scanned to stderr

Output control:
  -m, --max-count NUM       stop after NUM matches
      --strict-max-count    stop after exactly NUM matches (default allows one more)
  -n, --line-number         print line number with output lines
  -r, --recursive           search the directory FILE and everything below it

Colour control:
  -c, --colour, --color     highlight the matched text
"""

VERSION_TEXT = f"""{PROGRAM_NAME} {__version__}
License MIT
"""


class _HelpAction(argparse.Action):
    def __call__(self, parser, namespace, values, option_string=None):
        sys.stdout.write(HELP_TEXT)
        parser.exit()


class _VersionAction(argparse.Action):
    def __call__(self, parser, namespace, values, option_string=None):
        sys.stdout.write(VERSION_TEXT)
        parser.exit()


class GrepArgumentParser(argparse.ArgumentParser):
    # Usage problems become ConfigError so the entry point decides how to exit
    def error(self, message):
        raise ConfigError(message)


def _max_count(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid max count '{value}'")

    if number < 0:
        raise argparse.ArgumentTypeError(f"invalid max count '{value}'")

    return number


def build_parser() -> GrepArgumentParser:
    parser = GrepArgumentParser(prog=PROGRAM_NAME, add_help=False)

    parser.add_argument("--help", nargs=0, action=_HelpAction)
    parser.add_argument("-V", "--version", nargs=0, action=_VersionAction)
    parser.add_argument("-i", "--ignore-case", action="store_true")
    parser.add_argument("-n", "--line-number", action="store_true")
    parser.add_argument("-m", "--max-count", type=_max_count, default=None, metavar="NUM")
    parser.add_argument("--strict-max-count", action="store_true")
    parser.add_argument("-c", "--colour", "--color", dest="colour", action="store_true")
    parser.add_argument("-r", "--recursive", action="store_true")
    parser.add_argument("-v", "--verbose", action="store_true")
    parser.add_argument("positionals", nargs="*", metavar="PATTERN FILE")

    return parser


# parse_intermixed_args rejects dash-leading positionals after "--" on older Pythons
def _split_at_double_dash(argv: list[str]) -> tuple[list[str], list[str]]:
    if "--" not in argv:
        return list(argv), []

    index = argv.index("--")
    return list(argv[:index]), list(argv[index + 1:])


def parse_args(argv: list[str]) -> Configuration:
    """
    Turn command line arguments (without the program name) into a Configuration.

    The first positional is the pattern, the rest are targets; with the usual
    two positionals that is (pattern, file) or, with -r, (pattern, directory).

    Everything after the first "--" is positional, so a pattern starting
    with "-" can be given as `-- -foo FILE`.

    Raises:
        ConfigError for unknown options, bad values or a missing pattern/target.
    """
    option_args, literal_args = _split_at_double_dash(argv)

    parsed = build_parser().parse_intermixed_args(option_args)
    parsed.positionals.extend(literal_args)

    if len(parsed.positionals) < 2:
        raise ConfigError("a PATTERN and at least one FILE are required")

    pattern = parsed.positionals[0]
    targets = tuple(parsed.positionals[1:])

    if not pattern:
        raise ConfigError("PATTERN must not be empty")
    if any(not target for target in targets):
        raise ConfigError("FILE must not be empty")

    return Configuration(pattern=pattern,
                         targets=targets,
                         ignore_case=parsed.ignore_case,
                         show_line_number=parsed.line_number,
                         highlight_matches=parsed.colour,
                         recursive=parsed.recursive,
                         max_matches=parsed.max_count or None,
                         strict_max_matches=parsed.strict_max_count,
                         verbose=parsed.verbose)
