"""
Help text generation for option specifications.
"""
from typing import Iterable, List, Sequence

from quarrel.core.lookup import build_specification_lookup
from quarrel.core.spec import (DEFAULT_BAD_PREFIXES, DEFAULT_END_OPTIONS,
                               ParamKind, ParameterSpecification)

HELP_TITLE = 'Usage parameters:'


def build_help(expected: Iterable[ParameterSpecification] = (),
               positional_kind: ParamKind = ParamKind.STRING,
               bad_prefixes: Sequence[str] = DEFAULT_BAD_PREFIXES,
               end_of_options: str = DEFAULT_END_OPTIONS) -> List[str]:
    """
    Build basic help text, one line per option specification.

    Each line lists the sorted aliases of an option, the kind of value it
    captures, and its help text. This does fewer sanity checks than parse(),
    but duplicate aliases are still rejected.

    :return: List of lines, starting with a title line
    """
    lookup = build_specification_lookup(expected)
    prefixes = []
    helps = []
    seen = set()

    for alias, spec in lookup.items():
        if alias in seen:
            continue
        prefix = ', '.join(sorted(spec.names))
        if spec.consumes.consumes_value:
            prefix = f"{prefix} {spec.consumes.value.upper()}"
        prefixes.append(prefix)
        helps.append(spec.help_text)
        seen.update(spec.names)

    lines = [HELP_TITLE]
    if not prefixes:
        return lines

    width = max(len(prefix) for prefix in prefixes) + 3
    for prefix, help_text in zip(prefixes, helps):
        lines.append(f"{prefix:<{width}}{help_text}".rstrip())
    return lines


def echo_help(expected: Iterable[ParameterSpecification] = (),
              positional_kind: ParamKind = ParamKind.STRING,
              bad_prefixes: Sequence[str] = DEFAULT_BAD_PREFIXES,
              end_of_options: str = DEFAULT_END_OPTIONS) -> List[str]:
    """Print the help text to stdout and return its lines"""
    lines = build_help(expected, positional_kind, bad_prefixes, end_of_options)
    for line in lines:
        print(line)
    return lines
