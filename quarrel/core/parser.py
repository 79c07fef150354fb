"""
Command line classification: splits raw arguments into options, option
values and positional parameters.
"""
from typing import Iterable, Sequence

from quarrel.core.coerce import parse_parameter
from quarrel.core.errors import (AmbiguousPositionalError, ConfigurationError,
                                 HelpRequested, MissingValueError)
from quarrel.core.help import echo_help
from quarrel.core.lookup import build_specification_lookup
from quarrel.core.spec import (DEFAULT_BAD_PREFIXES, DEFAULT_END_OPTIONS,
                               CommandlineResults, ParamKind,
                               ParameterSpecification, ParsedParameter)
from quarrel.util.logger import logger


def parse(args: Sequence[str],
          expected: Iterable[ParameterSpecification] = (),
          positional_kind: ParamKind = ParamKind.STRING,
          bad_prefixes: Sequence[str] = DEFAULT_BAD_PREFIXES,
          end_of_options: str = DEFAULT_END_OPTIONS) -> CommandlineResults:
    """
    Parse command line arguments.

    Tokens matching an alias of ``expected`` are options, which may capture
    the following token as their value. Everything else is a positional
    parameter converted to ``positional_kind``. An unknown token starting
    with any of ``bad_prefixes`` is rejected as ambiguous, unless it comes
    after the ``end_of_options`` marker, which turns off option detection for
    the rest of the line. Captured option values are never checked against
    the bad prefixes, so '-' can still be passed as a file name.

    :param args: Arguments without the program name (e.g. sys.argv[1:])
    :param expected: Option specifications to detect
    :param positional_kind: Kind of positional parameters
    :param bad_prefixes: Prefixes marking an unknown token as ambiguous
    :param end_of_options: Marker that forces the remaining tokens to be positional
    :return: CommandlineResults with positionals in input order and options
        keyed by their first alias
    :raises ConfigurationError: If positional_kind or bad_prefixes are invalid
    :raises DuplicateAliasError: If an alias is declared twice
    :raises MissingValueError: If a value option is the last token
    :raises CoercionError: If a value can't be converted
    :raises AmbiguousPositionalError: If an unknown token looks like an option
    :raises HelpRequested: After printing help for a help option
    """
    if not isinstance(positional_kind, ParamKind) or not positional_kind.consumes_value:
        raise ConfigurationError(f"positional_kind can't be {positional_kind}")
    if isinstance(bad_prefixes, str):
        raise ConfigurationError("bad_prefixes must be a sequence of strings, not a string")
    for prefix in bad_prefixes:
        if not prefix:
            raise ConfigurationError("bad_prefixes can't contain zero length strings")

    expected = list(expected)
    lookup = build_specification_lookup(expected)
    adding_options = True
    positional_parameters = []
    options = {}

    i = 0
    while i < len(args):
        arg = args[i]

        if arg and adding_options:
            if arg == end_of_options:
                logger.debug(f"End of options marker at index {i}")
                adding_options = False
                i += 1
                continue

            spec = lookup.get(arg)
            if spec is not None:
                if spec.consumes == ParamKind.HELP:
                    logger.debug(f"Help requested by '{arg}'")
                    lines = echo_help(expected, positional_kind, bad_prefixes, end_of_options)
                    raise HelpRequested(lines)

                if spec.consumes == ParamKind.EMPTY:
                    parsed = ParsedParameter.empty()
                else:
                    if i + 1 >= len(args):
                        raise MissingValueError(arg)
                    parsed = parse_parameter(arg, args[i + 1], spec.consumes)
                    i += 1
                    if spec.custom_validator is not None:
                        parsed = spec.custom_validator(arg, parsed)

                logger.debug(f"Option '{spec.canonical}' = {parsed!r}")
                options[spec.canonical] = parsed
                i += 1
                continue

            for prefix in bad_prefixes:
                if arg.startswith(prefix):
                    raise AmbiguousPositionalError(arg, prefix, end_of_options)

        positional_parameters.append(
            parse_parameter(str(i + 1), arg, positional_kind))
        i += 1

    return CommandlineResults(positional_parameters, options)


class QuarrelParser:
    """
    Namespace entry point mirroring the module level functions.

    Usage:
        results = QuarrelParser.parse(sys.argv[1:], [
            ParameterSpecification(['-v', '--verbose'], help_text='Be verbose'),
        ])
    """
    DEFAULT_END_OPTIONS = DEFAULT_END_OPTIONS
    DEFAULT_BAD_PREFIXES = DEFAULT_BAD_PREFIXES

    parse = staticmethod(parse)
