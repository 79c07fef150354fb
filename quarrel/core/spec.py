"""
Option specifications and parse results.
"""
import math
from enum import Enum
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence, Union

DEFAULT_END_OPTIONS = '--'
DEFAULT_BAD_PREFIXES = ('-', '--')


class ParamKind(Enum):
    """Kind of value an option captures, or positionals are converted to"""
    EMPTY = 'empty'
    INT = 'int'
    LONG = 'long'
    FLOAT = 'float'
    DOUBLE = 'double'
    STRING = 'string'
    BOOLEAN = 'boolean'
    HELP = 'help'

    @property
    def consumes_value(self) -> bool:
        return self not in (ParamKind.EMPTY, ParamKind.HELP)

    @property
    def article_name(self) -> str:
        """Name used in error messages, e.g. 'an integer'"""
        if self == ParamKind.INT:
            return 'an integer'
        return f"a {self.value}"

    @classmethod
    def from_name(cls, name: Union[str, 'ParamKind']) -> 'ParamKind':
        """
        Resolve a kind from its textual name.

        :param name: Kind name such as 'int' or 'Boolean'. 'none' is an alias of 'empty'.
        :return: The matching ParamKind
        :raises ValueError: If the name is unknown
        """
        if isinstance(name, ParamKind):
            return name
        text = str(name).strip().lower()
        if text == 'none':
            text = 'empty'
        for kind in cls:
            if kind.value == text:
                return kind
        raise ValueError(f"Unknown parameter kind '{name}'")


class ParsedParameter:
    """
    A value produced by the parser: a kind tag plus its payload.

    Use the typed accessors (int_val, str_val, ...) when the kind is known.
    Using an accessor that does not match the kind raises TypeError, which is
    a programming error rather than a user input error.
    """
    __slots__ = ('kind', 'value')

    def __init__(self, kind: ParamKind, value: Any = None):
        object.__setattr__(self, 'kind', kind)
        object.__setattr__(self, 'value', value)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @classmethod
    def empty(cls) -> 'ParsedParameter':
        return cls(ParamKind.EMPTY)

    @classmethod
    def help(cls) -> 'ParsedParameter':
        return cls(ParamKind.HELP)

    @classmethod
    def of_int(cls, value: int) -> 'ParsedParameter':
        return cls(ParamKind.INT, value)

    @classmethod
    def of_long(cls, value: int) -> 'ParsedParameter':
        return cls(ParamKind.LONG, value)

    @classmethod
    def of_float(cls, value: float) -> 'ParsedParameter':
        return cls(ParamKind.FLOAT, value)

    @classmethod
    def of_double(cls, value: float) -> 'ParsedParameter':
        return cls(ParamKind.DOUBLE, value)

    @classmethod
    def of_string(cls, value: str) -> 'ParsedParameter':
        return cls(ParamKind.STRING, value)

    @classmethod
    def of_boolean(cls, value: bool) -> 'ParsedParameter':
        return cls(ParamKind.BOOLEAN, value)

    def _expect(self, kind: ParamKind) -> Any:
        if self.kind != kind:
            raise TypeError(f"Parsed parameter holds {self.kind.value}, not {kind.value}")
        return self.value

    @property
    def int_val(self) -> int:
        return self._expect(ParamKind.INT)

    @property
    def long_val(self) -> int:
        return self._expect(ParamKind.LONG)

    @property
    def float_val(self) -> float:
        return self._expect(ParamKind.FLOAT)

    @property
    def double_val(self) -> float:
        return self._expect(ParamKind.DOUBLE)

    @property
    def str_val(self) -> str:
        return self._expect(ParamKind.STRING)

    @property
    def bool_val(self) -> bool:
        return self._expect(ParamKind.BOOLEAN)

    def __eq__(self, other):
        if not isinstance(other, ParsedParameter):
            return NotImplemented
        if self.kind != other.kind:
            return False
        # NaN payloads from the same text compare equal
        return self.value is other.value or self.value == other.value or (
            isinstance(self.value, float) and isinstance(other.value, float) and
            math.isnan(self.value) and math.isnan(other.value))

    def __hash__(self):
        if isinstance(self.value, float) and math.isnan(self.value):
            return hash((self.kind, 'nan'))
        return hash((self.kind, self.value))

    def __repr__(self):
        if self.kind in (ParamKind.EMPTY, ParamKind.HELP):
            return f"ParsedParameter({self.kind.value})"
        return f"ParsedParameter({self.kind.value}={self.value!r})"


# Called as callback(alias, parsed) after type conversion; returns the value to store.
ParameterCallback = Callable[[str, ParsedParameter], ParsedParameter]


class ParameterSpecification:
    """
    Holds the expectations of an option.

    :param names: Aliases that trigger the option. The first one is canonical
        and is the key used in CommandlineResults.options.
    :param consumes: Kind of value captured from the following token
        (ParamKind.EMPTY for plain flags)
    :param custom_validator: Optional callback run after type conversion. It
        receives the alias as typed and the converted value, and returns the
        value to store. It may raise to reject the value.
    :param help_text: Description shown in help output
    """
    __slots__ = ('names', 'consumes', 'custom_validator', 'help_text')

    def __init__(self, names: Sequence[str], consumes: ParamKind = ParamKind.EMPTY,
                 custom_validator: Optional[ParameterCallback] = None, help_text: str = ''):
        if isinstance(names, str):
            names = [names]
        names = tuple(names)
        if not names:
            raise ValueError("A parameter specification needs at least one name")
        for name in names:
            if not isinstance(name, str):
                raise ValueError(f"Parameter names must be strings, got {name!r}")
        if custom_validator is not None and not callable(custom_validator):
            raise ValueError("custom_validator must be callable")
        object.__setattr__(self, 'names', names)
        object.__setattr__(self, 'consumes', ParamKind.from_name(consumes))
        object.__setattr__(self, 'custom_validator', custom_validator)
        object.__setattr__(self, 'help_text', help_text)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def canonical(self) -> str:
        return self.names[0]

    def __eq__(self, other):
        if not isinstance(other, ParameterSpecification):
            return NotImplemented
        return (self.names == other.names and self.consumes == other.consumes and
                self.custom_validator == other.custom_validator and
                self.help_text == other.help_text)

    def __hash__(self):
        return hash((self.names, self.consumes, self.help_text))

    def __repr__(self):
        return (f"ParameterSpecification(names={list(self.names)!r}, "
                f"consumes={self.consumes.value!r}, help_text={self.help_text!r})")


class CommandlineResults:
    """
    Result of a successful parse.

    Options are always keyed by the first alias of their specification. With
    a specification of ['-s', '--silent'] and '--silent' typed by the user,
    test for it with ``'-s' in results.options``.
    """

    def __init__(self, positional_parameters: Iterable[ParsedParameter],
                 options: Dict[str, ParsedParameter]):
        self.positional_parameters: List[ParsedParameter] = list(positional_parameters)
        self.options: Dict[str, ParsedParameter] = dict(options)

    def __eq__(self, other):
        if not isinstance(other, CommandlineResults):
            return NotImplemented
        return (self.positional_parameters == other.positional_parameters and
                self.options == other.options)

    def __repr__(self):
        return (f"CommandlineResults(positional_parameters={self.positional_parameters!r}, "
                f"options={self.options!r})")
