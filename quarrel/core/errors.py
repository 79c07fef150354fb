"""
Errors raised while parsing a command line.

Every parse failure derives from QuarrelError. HelpRequested is a control
signal, not a failure, and deliberately sits outside that hierarchy.
"""
from typing import List, Optional


class QuarrelError(Exception):
    """Base class for all command line parsing failures"""
    pass


class ConfigurationError(QuarrelError, ValueError):
    """The parse call itself was set up incorrectly"""
    pass


class DuplicateAliasError(QuarrelError, ValueError):
    """An alias is claimed more than once in the option specifications"""

    def __init__(self, alias: str):
        self.alias = alias
        super().__init__(f"Parameter '{alias}' repeated in input specification")


class MissingValueError(QuarrelError):
    """An option that consumes a value was the last token"""

    def __init__(self, param: str):
        self.param = param
        super().__init__(f"Parameter '{param}' requires a value, but none was provided")


class CoercionError(QuarrelError, ValueError):
    """
    A raw value could not be converted to the requested kind.

    :param param: Option alias or 1-based positional index that owned the value
    :param value: The raw text
    :param kind: The ParamKind the text was converted to
    """

    def __init__(self, param: str, value: str, kind):
        self.param = param
        self.value = value
        self.kind = kind
        super().__init__(
            f"Param '{param}' with value '{value}' can't be parsed into {kind.article_name}."
        )


class AmbiguousPositionalError(QuarrelError):
    """An unknown token looks like an option and was refused as positional"""

    def __init__(self, token: str, prefix: str, end_of_options: Optional[str] = None):
        self.token = token
        self.prefix = prefix
        self.end_of_options = end_of_options
        msg = f"Found ambiguous parameter '{token}' starting with '{prefix}'"
        if end_of_options:
            msg += (f", put '{end_of_options}' as the previous parameter "
                    f"if you want to force it as positional parameter.")
        super().__init__(msg)


class HelpRequested(Exception):
    """
    Raised after help text was emitted for a help option.

    Callers should stop and exit cleanly. The emitted lines are kept in
    ``lines`` for callers that want to show them somewhere else.
    """

    def __init__(self, lines: List[str]):
        self.lines = list(lines)
        super().__init__("Help requested")
