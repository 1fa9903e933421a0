"""
Configurable defaults for the arrays helpers.

The plain functions in `primaids.arrays` never read configuration; they take
every setting as an argument. PrimaidsConfig bundles the settings an
application wants to use everywhere (a "/" path delimiter, "%k"/"%v"
placeholders, strict lookups) and forwards them to those functions.

Configuration is kept as YAML via an intermediate dict, the same way other
structures are serialized:

    path_delimiter: "/"
    key_placeholder: "%k"
    value_placeholder: "%v"
    strict: true
"""
from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, fields
from typing import Any, Callable, Dict, Iterable, Mapping, MutableMapping, Sequence, Union

import yaml

from primaids import arrays
from primaids.exceptions import InvalidArgumentError


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PrimaidsConfig:
    """
    Defaults forwarded to the arrays helpers.

    Properties:
        path_delimiter: Separator used by get_nested
        key_placeholder: Key marker used by format
        value_placeholder: Value marker used by format
        strict: Whether missing keys raise OutOfBoundsError
    """

    path_delimiter: str = "."
    key_placeholder: str = "{key}"
    value_placeholder: str = "{value}"
    strict: bool = False

    def __post_init__(self):
        for name in ("path_delimiter", "key_placeholder", "value_placeholder"):
            value = getattr(self, name)
            if not isinstance(value, str) or value == "":
                raise InvalidArgumentError(f"{name} must be a non-empty string")
        if not isinstance(self.strict, bool):
            raise InvalidArgumentError("strict must be a boolean")

    def format(self, array: Union[Mapping, Sequence], template: str) -> str:
        return arrays.format(array, template, self.key_placeholder, self.value_placeholder)

    def get_nested(self, array: Union[Mapping, Sequence], path: str) -> Any:
        return arrays.get_nested(array, path, self.path_delimiter, self.strict)

    def get_and_call(self, array: Union[Mapping, Sequence], key: arrays.Key, func: Callable[[Any], Any]) -> Any:
        return arrays.get_and_call(array, key, func, self.strict)

    def rename(self, array: MutableMapping, source_key: arrays.Key, destination_key: arrays.Key) -> None:
        arrays.rename(array, source_key, destination_key, self.strict)

    def sub_set(self, array: Union[Mapping, Sequence], keys: Iterable[arrays.Key]) -> Dict[Any, Any]:
        return arrays.sub_set(array, keys, self.strict)


DEFAULT_CONFIG = PrimaidsConfig()


def config_to_dict(config: PrimaidsConfig) -> Dict[str, Any]:
    return asdict(config)


def config_from_dict(d: Dict[str, Any] | None) -> PrimaidsConfig:
    if d is None:
        return PrimaidsConfig()
    if not isinstance(d, dict):
        raise InvalidArgumentError(f"configuration must be a mapping, got {type(d).__name__}")

    known = {f.name for f in fields(PrimaidsConfig)}
    unknown = sorted(set(d) - known)
    if unknown:
        raise InvalidArgumentError(f"Unknown configuration keys: {', '.join(map(str, unknown))}")

    return PrimaidsConfig(**d)


def config_to_yaml(config: PrimaidsConfig) -> str:
    return yaml.safe_dump(config_to_dict(config), sort_keys=False)


def config_from_yaml(s: str) -> PrimaidsConfig:
    d = yaml.safe_load(s)
    return config_from_dict(d)


def load_config(path: str) -> PrimaidsConfig:
    """
    Read a PrimaidsConfig from a YAML file.

    An empty file gives the defaults.

    Raises:
        InvalidArgumentError: If the document is not a mapping of known keys
        OSError: If the file cannot be read
    """
    with open(path, encoding="utf-8") as fh:
        config = config_from_yaml(fh.read())
    logger.debug("Loaded primaids configuration from %s: %s", path, config)
    return config
