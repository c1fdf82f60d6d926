"""Tests for option parsing and config resolution."""

import pytest

from graphql_schema_to_ts.pipeline import (
    AvoidOptionals,
    ConfigResolver,
    EnumMode,
    NamingConvention,
    RenderConfig,
    TypeFilter,
    TypeScriptPluginConfig,
)


@pytest.fixture
def resolver():
    return ConfigResolver()


class TestTypeScriptPluginConfig:
    def test_from_dict_camel_case(self):
        config = TypeScriptPluginConfig.from_dict({"enumsAsTypes": True, "maybeValue": "T | undefined"})
        assert config.enums_as_types is True
        assert config.maybe_value == "T | undefined"

    def test_from_dict_snake_case(self):
        config = TypeScriptPluginConfig.from_dict({"future_proof_unions": True})
        assert config.future_proof_unions is True

    def test_unknown_option_is_ignored(self, caplog):
        config = TypeScriptPluginConfig.from_dict({"noSuchOption": True})
        assert config.to_dict() == TypeScriptPluginConfig().to_dict()
        assert "noSuchOption" in caplog.text

    def test_invalid_avoid_optionals(self):
        with pytest.raises(TypeError):
            TypeScriptPluginConfig.from_dict({"avoidOptionals": "yes"})

    def test_invalid_scalars(self):
        with pytest.raises(TypeError):
            TypeScriptPluginConfig.from_dict({"scalars": ["Date"]})

    def test_to_dict(self):
        config = TypeScriptPluginConfig.from_dict({"scalars": {"Date": "string"}, "avoidOptionals": {"field": True}})
        d = config.to_dict()
        assert d["scalars"] == {"Date": "string"}
        assert d["avoid_optionals"] == {"field": True}
        assert d["naming_convention"] == "keep"


class TestAvoidOptionals:
    def test_default_is_all_false(self, resolver):
        assert resolver.resolve().avoid_optionals == AvoidOptionals()

    def test_true_expands_to_all_sites(self, resolver):
        config = resolver.resolve({"avoidOptionals": True})
        assert config.avoid_optionals == AvoidOptionals(field=True, input_value=True, object=True, default_value=True)

    def test_record_form(self, resolver):
        config = resolver.resolve({"avoidOptionals": {"field": True, "defaultValue": True}})
        assert config.avoid_optionals == AvoidOptionals(field=True, default_value=True)

    def test_record_missing_keys_default_false(self, resolver):
        config = resolver.resolve({"avoidOptionals": {"inputValue": True}})
        assert config.avoid_optionals.input_value is True
        assert config.avoid_optionals.field is False
        assert config.avoid_optionals.object is False


class TestEnumMode:
    @pytest.mark.parametrize(
        "options,expected",
        [
            ({}, EnumMode.ENUM),
            ({"constEnums": True}, EnumMode.CONST_ENUM),
            ({"enumsAsConst": True}, EnumMode.CONST_ASSERTION),
            ({"enumsAsConst": True, "constEnums": True}, EnumMode.CONST_ASSERTION),
            ({"enumsAsTypes": True}, EnumMode.STRING_UNION),
            ({"enumsAsTypes": True, "enumsAsConst": True, "constEnums": True}, EnumMode.STRING_UNION),
        ],
    )
    def test_precedence(self, resolver, options, expected):
        assert resolver.resolve(options).enum_mode == expected

    def test_numeric_enums_plain(self, resolver):
        assert resolver.resolve({"numericEnums": True}).numeric_enums is True

    def test_numeric_enums_const_enum(self, resolver):
        assert resolver.resolve({"numericEnums": True, "constEnums": True}).numeric_enums is True

    def test_numeric_enums_ignored_for_string_union(self, resolver):
        assert resolver.resolve({"numericEnums": True, "enumsAsTypes": True}).numeric_enums is False

    def test_numeric_enums_ignored_for_const_assertion(self, resolver):
        assert resolver.resolve({"numericEnums": True, "enumsAsConst": True}).numeric_enums is False


class TestTypeFilter:
    def test_default(self, resolver):
        assert resolver.resolve().type_filter == TypeFilter.ALL

    def test_only_operation_types(self, resolver):
        assert resolver.resolve({"onlyOperationTypes": True}).type_filter == TypeFilter.ENUMS_AND_SCALARS

    def test_only_enums(self, resolver):
        assert resolver.resolve({"onlyEnums": True}).type_filter == TypeFilter.ENUMS_ONLY

    def test_only_enums_wins(self, resolver):
        config = resolver.resolve({"onlyEnums": True, "onlyOperationTypes": True})
        assert config.type_filter == TypeFilter.ENUMS_ONLY


class TestResolve:
    def test_defaults(self, resolver):
        config = resolver.resolve(None)
        assert config == RenderConfig()
        assert config.maybe_value == "T | null"
        assert config.input_maybe_value == "Maybe<T>"
        assert config.field_wrapper_value == "T"
        assert config.entire_field_wrapper_value == "T | Promise<T> | (() => T | Promise<T>)"
        assert config.default_scalar_type == "any"

    def test_accepts_dataclass(self, resolver):
        raw = TypeScriptPluginConfig(no_export=True, immutable_types=True)
        config = resolver.resolve(raw)
        assert config.no_export is True
        assert config.immutable_types is True

    def test_overrides_are_kept_verbatim(self, resolver):
        # Override bodies are validated later, when the alias is assembled
        config = resolver.resolve({"maybeValue": "T |"})
        assert config.maybe_value == "T |"

    def test_scalars(self, resolver):
        config = resolver.resolve({"scalars": {"Date": "string", "Json": "unknown"}})
        assert config.scalar_type("Date") == "string"
        assert config.scalar_type("Json") == "unknown"
        assert config.scalar_type("Other") is None

    def test_naming_convention(self, resolver):
        assert resolver.resolve({"namingConvention": "pascalCase"}).naming_convention == NamingConvention.PASCAL_CASE

    def test_invalid_naming_convention(self, resolver):
        with pytest.raises(ValueError):
            resolver.resolve({"namingConvention": "shouting"})

    def test_render_config_is_frozen(self, resolver):
        config = resolver.resolve()
        with pytest.raises(AttributeError):
            config.no_export = True


if __name__ == "__main__":
    pytest.main([__file__])
