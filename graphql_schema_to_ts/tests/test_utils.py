import pytest

from graphql_schema_to_ts.utils import camel_to_snake_case, property_key, snake_to_pascal_case, string_literal


class TestSnakeToPascalCase:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("first_name", "FirstName"),
            ("FIRST_NAME", "FirstName"),
            ("NON_FICTION", "NonFiction"),
            ("RED", "Red"),
            ("userById", "UserById"),
            ("user_by_id", "UserById"),
            ("HTMLParser", "HtmlParser"),
            ("FooBar", "FooBar"),
            ("node", "Node"),
            ("v2_API", "V2Api"),
            ("", ""),
        ],
    )
    def test_conversion(self, text, expected):
        assert snake_to_pascal_case(text) == expected


class TestCamelToSnakeCase:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("avoidOptionals", "avoid_optionals"),
            ("maybeValue", "maybe_value"),
            ("already_snake", "already_snake"),
        ],
    )
    def test_conversion(self, text, expected):
        assert camel_to_snake_case(text) == expected


class TestLiterals:
    def test_string_literal_escapes(self):
        assert string_literal("it's") == "'it\\'s'"

    def test_property_key(self):
        assert property_key("name") == "name"
        assert property_key("with-dash") == "'with-dash'"
        assert property_key("%future added value") == "'%future added value'"
