"""
Load and save option specification tables from YAML or JSON files.

A table file looks like:

    options:
      - names: [-o, --output]
        consumes: string
        help: Where to write the result
      - names: -v
        help: Be verbose

Only option declarations are stored. Values always come from the command line.
"""
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Union

from quarrel.core.errors import ConfigurationError
from quarrel.core.spec import ParamKind, ParameterSpecification
from quarrel.util.config_parser import config_file
from quarrel.util.logger import logger


def _open_table(path: Union[str, Path]):
    handler = config_file(path)
    if handler is None:
        raise ConfigurationError(
            f"Unsupported option table format '{Path(path).suffix}', use .yaml, .yml or .json")
    return handler


def specification_from_dict(entry: Dict[str, Any],
                            validators: Optional[Dict[str, Callable]] = None) -> ParameterSpecification:
    """
    Build one specification from a table entry.

    :param entry: Mapping with 'names' and optional 'consumes' and 'help'
    :param validators: Optional canonical alias -> callback mapping
    :return: The ParameterSpecification
    :raises ConfigurationError: If the entry is malformed
    """
    if not isinstance(entry, dict):
        raise ConfigurationError(f"Option entry must be a mapping, got: {entry!r}")
    names = entry.get('names')
    if isinstance(names, str):
        names = [names]
    if not names or not isinstance(names, list):
        raise ConfigurationError(f"Option entry is missing 'names': {entry!r}")
    for name in names:
        if not isinstance(name, str):
            raise ConfigurationError(
                f"Option name {name!r} in entry {entry!r} is not a string, quote it in the table")

    try:
        consumes = ParamKind.from_name(entry.get('consumes', 'empty'))
    except ValueError as e:
        raise ConfigurationError(f"Option '{names[0]}': {e}") from e

    validator = None
    if validators:
        validator = validators.get(names[0])
    help_text = entry.get('help')
    if help_text is None:
        help_text = ''
    return ParameterSpecification(names, consumes, validator, str(help_text))


def load_specifications(path: Union[str, Path],
                        validators: Optional[Dict[str, Callable]] = None) -> List[ParameterSpecification]:
    """
    Read option specifications from a YAML or JSON table.

    :param path: File ending in .yaml, .yml or .json
    :param validators: Optional canonical alias -> callback mapping, since
        callbacks can't be stored in a file
    :return: Specifications in file order
    :raises ConfigurationError: If the file format or its content is invalid
    """
    data = _open_table(path).load()
    if not isinstance(data, dict):
        raise ConfigurationError(f"Option table {path} must be a mapping with an 'options' list")
    entries = data.get('options', [])
    if not isinstance(entries, list):
        raise ConfigurationError(f"'options' in {path} must be a list")

    specs = [specification_from_dict(entry, validators) for entry in entries]
    if validators:
        known = {spec.canonical for spec in specs}
        for alias in validators:
            if alias not in known:
                logger.warning(f"Validator for unknown option '{alias}' in {path} ignored")
    logger.debug(f"Loaded {len(specs)} option specifications from {path}")
    return specs


def save_specifications(path: Union[str, Path], specs: List[ParameterSpecification]) -> None:
    """
    Write option specifications to a YAML or JSON table.
    Callbacks are not written.
    """
    entries = []
    for spec in specs:
        entry = {'names': list(spec.names)}
        if spec.consumes != ParamKind.EMPTY:
            entry['consumes'] = spec.consumes.value
        if spec.help_text:
            entry['help'] = spec.help_text
        entries.append(entry)
    _open_table(path).save({'options': entries})
