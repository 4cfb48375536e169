from abc import ABC, abstractmethod
from copy import deepcopy
from datetime import datetime
import logging
from os import PathLike
from pathlib import Path
from typing import Any, Dict, Generator, Mapping

from dateutil import tz
import typepigeon
import yaml


class Configuration(ABC, Mapping):
    fields: Dict[str, type]
    defaults: Dict[str, Any] = None

    def __init__(self, **configuration):
        self.__configuration = {field: None for field in self.fields}
        if len(configuration) > 0:
            self.update(configuration)

        if self.defaults is not None:
            update_none(self.__configuration, deepcopy(self.defaults))

        missing_fields = [field for field in self.fields if field not in self.__configuration]
        if len(missing_fields) > 0:
            raise ValueError(
                f'missing {len(missing_fields)} fields required by "{self.__class__.__name__}" - {list(missing_fields)}'
            )

    @classmethod
    @abstractmethod
    def from_file(cls, filename: PathLike) -> 'Configuration':
        raise NotImplementedError()

    @abstractmethod
    def to_file(self, filename: PathLike, overwrite: bool = True):
        raise NotImplementedError()

    def __copy__(self) -> 'Configuration':
        return self.__class__(**deepcopy(self.__configuration))

    def __contains__(self, key: str) -> bool:
        return key in self.__configuration

    def __getitem__(self, key: str) -> Any:
        return self.__configuration[key]

    def __setitem__(self, key: str, value: Any):
        if key not in self.fields:
            raise KeyError(f'"{key}" is not a field of "{self.__class__.__name__}"')
        if value is not None:
            field_type = self.fields[key]
            if isinstance(field_type, Mapping):
                value = convert_key_pairs(value, field_type)
            elif not isinstance(field_type, type) or not isinstance(value, field_type):
                value = typepigeon.to_type(value, field_type)
        self.__configuration[key] = value

    def update(self, other: Mapping):
        for key, value in other.items():
            if key in self and isinstance(self[key], Mapping) and isinstance(value, Mapping):
                value = {**self[key], **value}
            self[key] = value

    def __eq__(self, other: 'Configuration') -> bool:
        return isinstance(other, Configuration) and other.__configuration == self.__configuration

    def __repr__(self):
        configuration = ', '.join(
            [f'{key}={repr(value)}' for key, value in self.__configuration.items()]
        )
        return f'{self.__class__.__name__}({configuration})'

    def __len__(self) -> int:
        return len(self.__configuration)

    def __iter__(self) -> Generator:
        yield from self.__configuration


class ConfigurationYAML(Configuration, ABC):
    @classmethod
    def from_file(cls, filename: PathLike) -> 'Configuration':
        with open(filename) as input_file:
            configuration = yaml.safe_load(input_file)
        if configuration is None:
            configuration = {}
        return cls(**configuration)

    def to_file(self, filename: PathLike, overwrite: bool = True):
        if not isinstance(filename, Path):
            filename = Path(filename)
        if overwrite or not filename.exists():
            content = typepigeon.to_json(self._Configuration__configuration)
            with open(filename, 'w') as output_file:
                yaml.safe_dump(content, output_file)


class ParserConfiguration(ConfigurationYAML):
    fields = {
        'timezone': str,
        'reference_time': datetime,
        'callsigns': [str],
        'log': {'filename': Path, 'level': str},
    }

    defaults = {
        'timezone': None,
        'reference_time': None,
        'callsigns': [],
        'log': {'filename': None, 'level': 'INFO'},
    }

    def __setitem__(self, key: str, value: Any):
        if key == 'callsigns' and isinstance(value, str):
            value = [value]
        super().__setitem__(key, value)

        if key == 'timezone' and self['timezone'] is not None:
            if tz.gettz(self['timezone']) is None:
                raise ValueError(f'unrecognized time zone "{self["timezone"]}"')
        elif key == 'callsigns' and self['callsigns'] is not None:
            self._Configuration__configuration['callsigns'] = [
                callsign.strip()
                for entry in self['callsigns']
                for callsign in entry.split(',')
                if len(callsign.strip()) > 0
            ]
        elif key == 'log' and self['log'] is not None and self['log'].get('level') is not None:
            if not isinstance(logging.getLevelName(self['log']['level'].upper()), int):
                raise ValueError(f'unrecognized log level "{self["log"]["level"]}"')

    @property
    def log_level(self) -> int:
        level = self['log']['level'] if self['log'] is not None else None
        return logging.getLevelName(level.upper()) if level is not None else logging.INFO


def convert_key_pairs(value_mapping: Mapping, type_mapping: Mapping[str, type]) -> Dict[str, Any]:
    value_mapping = dict(**value_mapping)
    for key, value in value_mapping.items():
        if value is None:
            continue
        if key in type_mapping:
            value_type = type_mapping[key]
            if isinstance(value_type, Mapping):
                value = convert_key_pairs(value, value_type)
            elif not isinstance(value_type, type) or not isinstance(value, value_type):
                value = typepigeon.to_type(value, value_type)
        value_mapping[key] = value
    return value_mapping


def update_none(values: Dict[str, Any], defaults: Dict[str, Any]):
    for key, default_value in defaults.items():
        if key not in values or values[key] is None:
            values[key] = default_value
        elif isinstance(values[key], Mapping) and isinstance(default_value, Mapping):
            update_none(values[key], default_value)
