"""
Alias lookup table built from option specifications.
"""
from typing import Dict, Iterable

from quarrel.core.errors import DuplicateAliasError
from quarrel.core.spec import ParameterSpecification
from quarrel.util.logger import logger


def build_specification_lookup(
        expected: Iterable[ParameterSpecification]) -> Dict[str, ParameterSpecification]:
    """
    Map every alias to the specification that owns it.

    Aliases keep the order in which they were first seen, which help output
    relies on.

    :param expected: Option specifications in declaration order
    :return: Dictionary of alias -> specification
    :raises DuplicateAliasError: If an alias appears twice, in the same
        specification or in different ones
    """
    lookup = {}
    for spec in expected:
        for alias in spec.names:
            if alias in lookup:
                raise DuplicateAliasError(alias)
            lookup[alias] = spec
    logger.debug(f"Built lookup with {len(lookup)} aliases")
    return lookup
