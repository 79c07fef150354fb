"""
quarrel: declarative command line argument parsing.

Usage:
    from quarrel import parse, ParameterSpecification, ParamKind

    results = parse(sys.argv[1:], [
        ParameterSpecification(['-o', '--output'], ParamKind.STRING, help_text='Output file'),
        ParameterSpecification(['-h', '--help'], ParamKind.HELP, help_text='Show this help'),
    ])
    output = results.options['-o'].str_val
"""
from quarrel.core.coerce import parse_boolean, parse_boolean_or_none, parse_parameter
from quarrel.core.errors import (AmbiguousPositionalError, CoercionError,
                                 ConfigurationError, DuplicateAliasError,
                                 HelpRequested, MissingValueError, QuarrelError)
from quarrel.core.help import build_help, echo_help
from quarrel.core.lookup import build_specification_lookup
from quarrel.core.parser import QuarrelParser, parse
from quarrel.core.spec import (DEFAULT_BAD_PREFIXES, DEFAULT_END_OPTIONS,
                               CommandlineResults, ParamKind,
                               ParameterCallback, ParameterSpecification,
                               ParsedParameter)
from quarrel.core.spec_loader import load_specifications, save_specifications

version_info = (0, 1, 0)
__version__ = '.'.join(str(part) for part in version_info)
