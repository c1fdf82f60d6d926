import pytest

from graphql_schema_to_ts.type_expression import TypeExpressionError, is_valid_type_expression, parse_type_expression, tokenize


class TestTokenize:
    def test_skips_whitespace(self):
        tokens = tokenize("T | null")
        assert [token.text for token in tokens] == ["T", "|", "null", ""]
        assert tokens[-1].kind == "end"

    def test_arrow_is_one_token(self):
        assert [token.text for token in tokenize("() => T")][:3] == ["(", ")", "=>"]

    def test_string_literal(self):
        tokens = tokenize("'a b' | \"c\"")
        assert tokens[0].kind == "string"
        assert tokens[0].text == "'a b'"
        assert tokens[2].kind == "string"

    def test_unexpected_character(self):
        with pytest.raises(TypeExpressionError) as e:
            tokenize("T @ U")
        assert e.value.position == 2


class TestValidExpressions:
    @pytest.mark.parametrize(
        "text",
        [
            "T",
            "T | null",
            "T | null | undefined",
            "Maybe<T>",
            "T | Promise<T> | (() => T | Promise<T>)",
            "T extends PromiseLike<infer U> ? Promise<U | null> : T | null",
            "Array<T>",
            "T[]",
            "readonly T[]",
            "ReadonlyArray<T>",
            "Scalars['ID']",
            "keyof T",
            "typeof value.inner",
            "{ __typename?: 'Other' }",
            "{ readonly a: T; b?: U, [key: string]: V; m(x: T): U }",
            "[a: string, b?: number, ...rest: T[]]",
            "[T, U?]",
            "(value: T, ...rest: U[]) => void",
            "<U>(value: U) => T",
            "new (x: T) => U",
            "A & B | C",
            "| A | B",
            "-1 | 0 | 1",
            "`${Color}`",
            "Record<string, T>",
            "{ [K in keyof T]: T[K] }",
            "{ readonly [K in keyof T]?: T[K] }",
            "{ -readonly [K in keyof T]-?: T[K] }",
            "{ +readonly [K in keyof T]+?: T[K] | null }",
            "{ [K in keyof T as Exclude<K, 'id'>]: T[K] }",
            "import('./types').Maybe<T>",
            "import('./types')",
            "abstract new () => T",
            "1n | 2n",
            "T extends 0n ? never : T",
        ],
    )
    def test_parses(self, text):
        parse_type_expression(text)
        assert is_valid_type_expression(text)


class TestInvalidExpressions:
    @pytest.mark.parametrize(
        "text",
        [
            "",
            "   ",
            "T |",
            "Maybe<T",
            "(T",
            "T | null;",
            "T extends U ? X",
            "{ a: }",
            "<>",
            "T T",
            "import(T)",
            "{ [K in]: T }",
            "abstract T",
            "{ -[K in T]: T }",
        ],
    )
    def test_rejected(self, text):
        with pytest.raises(TypeExpressionError):
            parse_type_expression(text)
        assert not is_valid_type_expression(text)

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_type_expression("T |")

    def test_error_reports_position(self):
        with pytest.raises(TypeExpressionError) as e:
            parse_type_expression("T | null;")
        assert e.value.position == 8
        assert "';'" in str(e.value)
