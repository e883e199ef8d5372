"""A configuration for the `itch` command.

Settings come from three sources, in increasing priority:
built-in defaults, a TOML case file, and the command line.
"""

from enum import Enum
import logging
from pathlib import Path
import typing as t

import pydantic
import tomlkit

from itch import comparators


class ComparatorName(str, Enum):
    STRICT = 'strict'
    EQUAL = 'equal'
    CASEFOLD = 'casefold'
    CLOSE = 'close'


# Names are case-insensitive, and some have friendlier spellings.
COMPARATOR_ALIASES = {
    '===': ComparatorName.STRICT,
    'eq': ComparatorName.EQUAL,
    '==': ComparatorName.EQUAL,
    'ignore-case': ComparatorName.CASEFOLD,
    'icase': ComparatorName.CASEFOLD,
    'approx': ComparatorName.CLOSE,
}


DEFAULT_PATH = Path('.itch.toml')


class Case(pydantic.BaseModel):
    model_config = pydantic.ConfigDict(frozen=True)

    candidates: t.Tuple[str, ...]
    result: str

    @pydantic.field_validator('candidates', mode='before')
    @classmethod
    def listify(cls, candidates):
        # A single candidate may be written without brackets.
        if isinstance(candidates, str):
            return (candidates,)
        return candidates


class Configuration(pydantic.BaseModel):
    model_config = pydantic.ConfigDict(frozen=True)

    comparator: ComparatorName = ComparatorName.STRICT
    tolerance: float = 1e-9
    numeric: bool = False
    default: t.Optional[str] = None
    cases: t.Tuple[Case, ...] = ()

    @pydantic.field_validator('comparator', mode='before')
    @classmethod
    def canonical_comparator(cls, name):
        if isinstance(name, str):
            name = name.lower()
            name = COMPARATOR_ALIASES.get(name, name)
        return ComparatorName(name)

    @pydantic.field_validator('tolerance')
    @classmethod
    def non_negative(cls, tolerance):
        if tolerance < 0:
            raise ValueError('tolerance must not be negative')
        return tolerance

    def compare(self) -> comparators.Comparator:
        if self.comparator is ComparatorName.EQUAL:
            return comparators.equals
        if self.comparator is ComparatorName.CASEFOLD:
            return comparators.casefold_equals
        if self.comparator is ComparatorName.CLOSE:
            return comparators.close_to(abs_tol=self.tolerance)
        return comparators.strict_equals

    def override(self, overrides: 'Configuration') -> 'Configuration':
        # Only fields that were given explicitly override.
        # Cases accumulate instead.
        fields = self.model_dump()
        for field in overrides.model_fields_set:
            fields[field] = getattr(overrides, field)
        if 'cases' in overrides.model_fields_set:
            fields['cases'] = self.cases + overrides.cases
        return Configuration.model_validate(fields)

    @staticmethod
    def from_file(path):
        with open(path, 'r') as file:
            document = tomlkit.load(file)
        logging.debug(f'read configuration: {path}')
        return Configuration.model_validate(document.unwrap())

    @staticmethod
    def from_all(path=None, **kwargs):
        args = Configuration.model_validate(kwargs)
        config = Configuration()
        try:
            config = config.override(
                Configuration.from_file(DEFAULT_PATH if path is None else path)
            )
        except FileNotFoundError:
            # Only the default file is optional.
            if path is not None:
                raise
            logging.debug(f'missing configuration file: {DEFAULT_PATH}')
        return config.override(args)
