"""
Conversion of raw command line text into typed ParsedParameter values.
"""
import math
import re
import struct
from typing import Optional

from quarrel.core.errors import CoercionError
from quarrel.core.spec import ParamKind, ParsedParameter

INT_MIN, INT_MAX = -2 ** 31, 2 ** 31 - 1
LONG_MIN, LONG_MAX = -2 ** 63, 2 ** 63 - 1

TRUE_WORDS = ('y', 'yes', 'true', '1', 'on')
FALSE_WORDS = ('n', 'no', 'false', '0', 'off')

_INTEGER_RE = re.compile(r'[+-]?[0-9]+')
_DECIMAL_RE = re.compile(r'[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?')
_SPECIAL_FLOATS = {
    'NaN': math.nan,
    'Infinity': math.inf,
    '+Infinity': math.inf,
    '-Infinity': -math.inf,
}


def parse_boolean_or_none(text: str) -> Optional[bool]:
    """
    Interpret text as a boolean.

    :return: True for y, yes, true, 1 or on. False for n, no, false, 0 or
        off. None for anything else. Matching is case-sensitive.
    """
    if text in TRUE_WORDS:
        return True
    if text in FALSE_WORDS:
        return False
    return None


def parse_boolean(text: str) -> bool:
    """
    Like parse_boolean_or_none, but raises CoercionError on unknown text.
    """
    value = parse_boolean_or_none(text)
    if value is None:
        raise CoercionError('value', text, ParamKind.BOOLEAN)
    return value


def _parse_integer(text: str, low: int, high: int) -> Optional[int]:
    if not _INTEGER_RE.fullmatch(text):
        return None
    value = int(text)
    if value < low or value > high:
        return None
    return value


def _parse_decimal(text: str) -> Optional[float]:
    if text in _SPECIAL_FLOATS:
        return _SPECIAL_FLOATS[text]
    if not _DECIMAL_RE.fullmatch(text):
        return None
    return float(text)


def to_single_precision(value: float) -> float:
    """Round a Python float to the nearest IEEE-754 single precision value"""
    try:
        return struct.unpack('f', struct.pack('f', value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def parse_parameter(param: str, value: str, kind: ParamKind) -> ParsedParameter:
    """
    Convert the text the user typed for a parameter into the requested kind.

    :param param: Option alias or positional index, only used in errors
    :param value: Raw text to convert
    :param kind: Target kind
    :return: The converted ParsedParameter
    :raises CoercionError: If the text is not valid for the kind
    """
    if kind == ParamKind.EMPTY:
        return ParsedParameter.empty()
    elif kind == ParamKind.HELP:
        return ParsedParameter.help()
    elif kind == ParamKind.STRING:
        return ParsedParameter.of_string(value)
    elif kind == ParamKind.INT:
        number = _parse_integer(value, INT_MIN, INT_MAX)
        if number is not None:
            return ParsedParameter.of_int(number)
    elif kind == ParamKind.LONG:
        number = _parse_integer(value, LONG_MIN, LONG_MAX)
        if number is not None:
            return ParsedParameter.of_long(number)
    elif kind == ParamKind.FLOAT:
        number = _parse_decimal(value)
        if number is not None:
            return ParsedParameter.of_float(to_single_precision(number))
    elif kind == ParamKind.DOUBLE:
        number = _parse_decimal(value)
        if number is not None:
            return ParsedParameter.of_double(number)
    elif kind == ParamKind.BOOLEAN:
        flag = parse_boolean_or_none(value)
        if flag is not None:
            return ParsedParameter.of_boolean(flag)
    else:
        raise ValueError(f"Unsupported parameter kind {kind!r}")
    raise CoercionError(param, value, kind)
