"""
Example copy command line program built on the quarrel parser.
It only reports what it would copy.
"""
import sys
from typing import List, Optional

from quarrel.core.errors import HelpRequested, QuarrelError
from quarrel.core.help import echo_help
from quarrel.core.parser import parse
from quarrel.core.spec import CommandlineResults, ParamKind, ParameterSpecification
from quarrel.util.logger import logger, Color

PARAM_PRESERVE_ALL = '-a'
PARAM_FORCE = '-f'
PARAM_FOLLOW_SOME_SYMBOLIC_LINKS = '-H'
PARAM_INTERACTIVE = '-i'
PARAM_FOLLOW_ALL_SYMBOLIC_LINKS = '-L'
PARAM_NO_OVERWRITE = '-n'
PARAM_FOLLOW_NO_SYMBOLIC_LINKS = '-P'
PARAM_PRESERVE_ATTRIBUTES = '-p'
PARAM_RECURSIVE = '-R'
PARAM_VERBOSE = '-v'
PARAM_HELP = '-h'


class CopyFilesCLI:
    """
    A cp-like CLI: flags followed by one or more sources and a destination.
    """

    def __init__(self):
        self.params: List[ParameterSpecification] = []
        self.results: Optional[CommandlineResults] = None

    def add_option(self, names, msg: str = "", consumes: ParamKind = ParamKind.EMPTY):
        """Add an option specification"""
        if isinstance(names, str):
            names = [names]
        self.params.append(ParameterSpecification(names, consumes, help_text=msg))

    def define_options(self):
        """Define the copy command flags"""
        self.add_option(PARAM_PRESERVE_ALL,
                        f"Same as {PARAM_PRESERVE_ATTRIBUTES} {PARAM_FOLLOW_NO_SYMBOLIC_LINKS} "
                        f"{PARAM_RECURSIVE} options, preserves structure and attributes of "
                        f"files but not directory structure")
        self.add_option(PARAM_FORCE, "Force overwrite destination files")
        self.add_option(PARAM_FOLLOW_SOME_SYMBOLIC_LINKS, "Follow symbolic links on the command line")
        self.add_option(PARAM_INTERACTIVE, "Prompt before overwriting destination")
        self.add_option(PARAM_FOLLOW_ALL_SYMBOLIC_LINKS, "Follow all symbolic links recursively")
        self.add_option(PARAM_NO_OVERWRITE, "Do not overwrite destination")
        self.add_option(PARAM_FOLLOW_NO_SYMBOLIC_LINKS, "No symbolic links are followed")
        self.add_option(PARAM_PRESERVE_ATTRIBUTES, "Attributes are preserved to destination")
        self.add_option(PARAM_RECURSIVE, "Follow source directories recursively")
        self.add_option(PARAM_VERBOSE, "Be verbose about actions")
        self.add_option(PARAM_HELP, "Shows this help on the commandline", ParamKind.HELP)

    def parse(self, args: List[str]) -> Optional[CommandlineResults]:
        """
        Parse the argument list.

        :param args: Arguments without the program name
        :return: The parse results, or None if sources/destination are missing
        :raises HelpRequested: If -h was given
        :raises QuarrelError: On malformed input
        """
        self.results = parse(args, self.params)
        if len(self.results.positional_parameters) < 2:
            print("Missing parameters, you need to pass the source and dest targets.")
            echo_help(self.params)
            return None

        for spec in self.params:
            if spec.canonical in self.results.options:
                logger.print(Color.CYAN, f"Found option '{spec.canonical}'.")
        return self.results

    def copy(self):
        """Report each source -> destination pair"""
        positionals = self.results.positional_parameters
        dest = positionals[-1].str_val
        for src in positionals[:-1]:
            print(f"Copying {src.str_val} -> {dest}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the example copy CLI"""
    if argv is None:
        argv = sys.argv[1:]
    try:
        cli = CopyFilesCLI()
        cli.define_options()
        if cli.parse(argv) is None:
            return 1
        cli.copy()
    except HelpRequested:
        return 0
    except QuarrelError as e:
        logger.error(f"Error: {e}")
        return 1
    except KeyboardInterrupt:
        print("\nOperation cancelled by user")
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
