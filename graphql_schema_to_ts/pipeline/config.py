"""
Configuration for the declaration generator.

`TypeScriptPluginConfig` holds the raw options as written in a codegen
config file, shorthand included. `ConfigResolver` turns it into a
`RenderConfig`: one frozen, fully populated policy record that every
renderer receives explicitly.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any

from ..utils import camel_to_snake_case

logger = logging.getLogger(__name__)

DEFAULT_MAYBE_VALUE = "T | null"
DEFAULT_INPUT_MAYBE_VALUE = "Maybe<T>"
DEFAULT_FIELD_WRAPPER_VALUE = "T"
DEFAULT_ENTIRE_FIELD_WRAPPER_VALUE = "T | Promise<T> | (() => T | Promise<T>)"
DEFAULT_SCALAR_TYPE = "any"


class EnumMode(str, Enum):
    """How enums are represented. Exactly one applies per run."""

    STRING_UNION = "string_union"  # type Color = 'RED' | 'GREEN'
    CONST_ASSERTION = "const_assertion"  # const Color = {...} as const
    CONST_ENUM = "const_enum"  # const enum Color {...}
    ENUM = "enum"  # enum Color {...}


class TypeFilter(str, Enum):
    """Which schema categories are emitted."""

    ALL = "all"
    ENUMS_AND_SCALARS = "enums_and_scalars"
    ENUMS_ONLY = "enums_only"


class NamingConvention(str, Enum):
    """Naming convention applied to enum member keys."""

    KEEP = "keep"
    PASCAL_CASE = "pascalCase"


@dataclass(frozen=True)
class AvoidOptionals:
    """Per-site suppression of the optional member marker."""

    field: bool = False  # output fields
    input_value: bool = False  # input object fields
    object: bool = False  # field arguments
    default_value: bool = False  # input values that declare a default


@dataclass
class TypeScriptPluginConfig:
    """Raw configuration options, as given by the user."""

    # bool, or a record with keys field / inputValue / object / defaultValue
    avoid_optionals: bool | dict[str, bool] = False

    # Enum representation flags
    const_enums: bool = False
    enums_as_types: bool = False
    enums_as_const: bool = False
    numeric_enums: bool = False
    future_proof_enums: bool = False
    future_proof_unions: bool = False

    # Output filtering
    only_enums: bool = False
    only_operation_types: bool = False

    immutable_types: bool = False

    # Wrapper alias overrides
    maybe_value: str = DEFAULT_MAYBE_VALUE
    input_maybe_value: str = DEFAULT_INPUT_MAYBE_VALUE
    wrap_field_definitions: bool = False
    field_wrapper_value: str = DEFAULT_FIELD_WRAPPER_VALUE
    wrap_entire_field_definitions: bool = False
    entire_field_wrapper_value: str = DEFAULT_ENTIRE_FIELD_WRAPPER_VALUE

    no_export: bool = False
    disable_descriptions: bool = False
    use_implementing_types: bool = False
    allow_enum_string_types: bool = False

    # Custom scalar name -> TypeScript type
    scalars: dict[str, str] = field(default_factory=dict)
    default_scalar_type: str = DEFAULT_SCALAR_TYPE

    # __typename handling on object types
    skip_typename: bool = False
    non_optional_typename: bool = False

    # Naming convention for enum member keys ("keep" or "pascalCase")
    naming_convention: str = NamingConvention.KEEP.value

    @staticmethod
    def from_dict(d: dict) -> TypeScriptPluginConfig:
        """Create a config from a dictionary of camelCase or snake_case options."""
        config = TypeScriptPluginConfig()
        known = {f.name for f in fields(TypeScriptPluginConfig)}
        for k, v in d.items():
            attr = camel_to_snake_case(k)
            if attr not in known:
                logger.warning("Ignoring unknown option '%s'", k)
                continue
            setattr(config, attr, v)

        if not isinstance(config.avoid_optionals, (bool, dict)):
            raise TypeError(f"Expected avoidOptionals to be a bool or a dict, got {type(config.avoid_optionals)}")
        if not isinstance(config.scalars, dict):
            raise TypeError(f"Expected scalars to be a dict, got {type(config.scalars)}")
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "avoid_optionals": dict(self.avoid_optionals) if isinstance(self.avoid_optionals, dict) else self.avoid_optionals,
            "const_enums": self.const_enums,
            "enums_as_types": self.enums_as_types,
            "enums_as_const": self.enums_as_const,
            "numeric_enums": self.numeric_enums,
            "future_proof_enums": self.future_proof_enums,
            "future_proof_unions": self.future_proof_unions,
            "only_enums": self.only_enums,
            "only_operation_types": self.only_operation_types,
            "immutable_types": self.immutable_types,
            "maybe_value": self.maybe_value,
            "input_maybe_value": self.input_maybe_value,
            "wrap_field_definitions": self.wrap_field_definitions,
            "field_wrapper_value": self.field_wrapper_value,
            "wrap_entire_field_definitions": self.wrap_entire_field_definitions,
            "entire_field_wrapper_value": self.entire_field_wrapper_value,
            "no_export": self.no_export,
            "disable_descriptions": self.disable_descriptions,
            "use_implementing_types": self.use_implementing_types,
            "allow_enum_string_types": self.allow_enum_string_types,
            "scalars": dict(self.scalars),
            "default_scalar_type": self.default_scalar_type,
            "skip_typename": self.skip_typename,
            "non_optional_typename": self.non_optional_typename,
            "naming_convention": self.naming_convention,
        }


@dataclass(frozen=True)
class RenderConfig:
    """Fully resolved rendering policy. Immutable for the run."""

    avoid_optionals: AvoidOptionals = AvoidOptionals()
    enum_mode: EnumMode = EnumMode.ENUM
    # Only ever True in ENUM / CONST_ENUM mode
    numeric_enums: bool = False
    type_filter: TypeFilter = TypeFilter.ALL

    maybe_value: str = DEFAULT_MAYBE_VALUE
    input_maybe_value: str = DEFAULT_INPUT_MAYBE_VALUE
    wrap_field_definitions: bool = False
    field_wrapper_value: str = DEFAULT_FIELD_WRAPPER_VALUE
    wrap_entire_field_definitions: bool = False
    entire_field_wrapper_value: str = DEFAULT_ENTIRE_FIELD_WRAPPER_VALUE

    future_proof_enums: bool = False
    future_proof_unions: bool = False
    immutable_types: bool = False
    no_export: bool = False
    disable_descriptions: bool = False
    use_implementing_types: bool = False
    allow_enum_string_types: bool = False

    scalars: tuple[tuple[str, str], ...] = ()
    default_scalar_type: str = DEFAULT_SCALAR_TYPE
    skip_typename: bool = False
    non_optional_typename: bool = False
    naming_convention: NamingConvention = NamingConvention.KEEP

    def scalar_type(self, name: str) -> str | None:
        """The configured TypeScript type for a scalar, if any."""
        return dict(self.scalars).get(name)


class ConfigResolver:
    """Resolves raw options into a RenderConfig.

    Resolution never fails on contradictory flags: fixed precedence rules
    pick one outcome.
    """

    AVOID_OPTIONALS_KEYS = {
        "field": "field",
        "inputValue": "input_value",
        "object": "object",
        "defaultValue": "default_value",
    }

    def resolve(self, raw: TypeScriptPluginConfig | dict | None = None) -> RenderConfig:
        """
        Resolve raw options.

        Args:
            raw: Raw config dataclass, plain option dictionary, or None for defaults

        Returns:
            RenderConfig with every field set
        """
        if raw is None:
            raw = TypeScriptPluginConfig()
        elif isinstance(raw, dict):
            raw = TypeScriptPluginConfig.from_dict(raw)

        enum_mode = self.resolve_enum_mode(raw)
        config = RenderConfig(
            avoid_optionals=self.resolve_avoid_optionals(raw.avoid_optionals),
            enum_mode=enum_mode,
            numeric_enums=bool(raw.numeric_enums) and enum_mode in (EnumMode.ENUM, EnumMode.CONST_ENUM),
            type_filter=self.resolve_type_filter(raw),
            maybe_value=raw.maybe_value,
            input_maybe_value=raw.input_maybe_value,
            wrap_field_definitions=bool(raw.wrap_field_definitions),
            field_wrapper_value=raw.field_wrapper_value,
            wrap_entire_field_definitions=bool(raw.wrap_entire_field_definitions),
            entire_field_wrapper_value=raw.entire_field_wrapper_value,
            future_proof_enums=bool(raw.future_proof_enums),
            future_proof_unions=bool(raw.future_proof_unions),
            immutable_types=bool(raw.immutable_types),
            no_export=bool(raw.no_export),
            disable_descriptions=bool(raw.disable_descriptions),
            use_implementing_types=bool(raw.use_implementing_types),
            allow_enum_string_types=bool(raw.allow_enum_string_types),
            scalars=tuple(sorted(raw.scalars.items())),
            default_scalar_type=raw.default_scalar_type,
            skip_typename=bool(raw.skip_typename),
            non_optional_typename=bool(raw.non_optional_typename),
            naming_convention=NamingConvention(raw.naming_convention),
        )
        logger.debug("Resolved render config: enum_mode=%s type_filter=%s", config.enum_mode.value, config.type_filter.value)
        return config

    def resolve_avoid_optionals(self, value: bool | dict[str, bool]) -> AvoidOptionals:
        """Expand the bool-or-record shorthand."""
        if isinstance(value, bool):
            return AvoidOptionals(field=value, input_value=value, object=value, default_value=value)

        resolved = {}
        for key, attr in self.AVOID_OPTIONALS_KEYS.items():
            # Accept snake_case keys too
            resolved[attr] = bool(value.get(key, value.get(attr, False)))
        return AvoidOptionals(**resolved)

    @staticmethod
    def resolve_enum_mode(raw: TypeScriptPluginConfig) -> EnumMode:
        """enumsAsTypes > enumsAsConst > constEnums > plain enum."""
        if raw.enums_as_types:
            return EnumMode.STRING_UNION
        if raw.enums_as_const:
            return EnumMode.CONST_ASSERTION
        if raw.const_enums:
            return EnumMode.CONST_ENUM
        return EnumMode.ENUM

    @staticmethod
    def resolve_type_filter(raw: TypeScriptPluginConfig) -> TypeFilter:
        """onlyEnums is strictly narrower than onlyOperationTypes, so it wins."""
        if raw.only_enums:
            return TypeFilter.ENUMS_ONLY
        if raw.only_operation_types:
            return TypeFilter.ENUMS_AND_SCALARS
        return TypeFilter.ALL
