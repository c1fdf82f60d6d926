"""
TypeScript type expression parser.

Checks that a wrapper alias body (such as `T | null` or
`T extends PromiseLike<infer U> ? Promise<U | null> : T | null`) is a
syntactically valid TypeScript type. Nothing is type-checked: names are
not resolved and the parse result is discarded.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

_TOKEN_PATTERN = re.compile(
    r"""
    (?P<space>\s+)
  | (?P<ident>[A-Za-z_$][A-Za-z0-9_$]*)
  | (?P<number>\d+n|\d+(?:\.\d+)?)
  | (?P<string>'(?:[^'\\\n]|\\.)*'|"(?:[^"\\\n]|\\.)*")
  | (?P<template>`(?:[^`\\]|\\.)*`)
  | (?P<punct>=>|\.\.\.|[|&()\[\]{}<>,:;?.=\-+])
    """,
    re.VERBOSE,
)


class TypeExpressionError(ValueError):
    """Raised when text is not a valid TypeScript type expression."""

    def __init__(self, message: str, position: int):
        self.position = position
        super().__init__(f"{message} at position {position}")


@dataclass(frozen=True)
class Token:
    kind: str
    text: str
    position: int


def tokenize(text: str) -> list[Token]:
    """Split a type expression into tokens."""
    tokens = []
    position = 0
    while position < len(text):
        match = _TOKEN_PATTERN.match(text, position)
        if match is None:
            raise TypeExpressionError(f"unexpected character {text[position]!r}", position)
        kind = match.lastgroup
        if kind != "space":
            tokens.append(Token(kind, match.group(), position))
        position = match.end()
    tokens.append(Token("end", "", len(text)))
    return tokens


class TypeExpressionParser:
    """Recursive descent parser over the TypeScript type grammar."""

    # Prefix keywords that take a type operand
    TYPE_OPERATORS = {"keyof", "readonly", "unique"}

    def __init__(self, text: str):
        self.text = text
        self.tokens = tokenize(text)
        self.index = 0

    def parse(self) -> None:
        """Parse the whole text as a single type."""
        if self._peek().kind == "end":
            raise TypeExpressionError("empty type expression", 0)
        self._type()
        token = self._peek()
        if token.kind != "end":
            raise TypeExpressionError(f"unexpected {token.text!r}", token.position)

    # Token helpers

    def _peek(self, offset: int = 0) -> Token:
        index = min(self.index + offset, len(self.tokens) - 1)
        return self.tokens[index]

    def _advance(self) -> Token:
        token = self._peek()
        if token.kind != "end":
            self.index += 1
        return token

    def _at(self, text: str) -> bool:
        token = self._peek()
        return token.kind in ("punct", "ident") and token.text == text

    def _accept(self, text: str) -> bool:
        if self._at(text):
            self._advance()
            return True
        return False

    def _expect(self, text: str) -> Token:
        token = self._peek()
        if not self._at(text):
            found = "end of type expression" if token.kind == "end" else repr(token.text)
            raise TypeExpressionError(f"expected {text!r}, found {found}", token.position)
        return self._advance()

    def _expect_ident(self) -> Token:
        token = self._peek()
        if token.kind != "ident":
            found = "end of type expression" if token.kind == "end" else repr(token.text)
            raise TypeExpressionError(f"expected a name, found {found}", token.position)
        return self._advance()

    # Grammar

    def _type(self) -> None:
        """type := union ('extends' union '?' type ':' type)?"""
        self._union()
        if self._accept("extends"):
            self._union()
            self._expect("?")
            self._type()
            self._expect(":")
            self._type()

    def _union(self) -> None:
        self._accept("|")
        self._intersection()
        while self._accept("|"):
            self._intersection()

    def _intersection(self) -> None:
        self._accept("&")
        self._postfix()
        while self._accept("&"):
            self._postfix()

    def _postfix(self) -> None:
        """Array suffixes and indexed access: T[], T['key']."""
        self._primary()
        while self._at("["):
            self._advance()
            if not self._accept("]"):
                self._type()
                self._expect("]")

    def _primary(self) -> None:
        token = self._peek()

        if token.kind in ("string", "number", "template"):
            self._advance()
            return

        if token.kind == "punct":
            if token.text == "(":
                self._parenthesized_or_function()
                return
            if token.text == "<":
                # Generic function type: <U>(value: U) => T
                self._type_parameters()
                self._function_type()
                return
            if token.text == "{":
                self._object_type()
                return
            if token.text == "[":
                self._tuple_type()
                return
            if token.text == "-" and self._peek(1).kind == "number":
                self._advance()
                self._advance()
                return
            raise TypeExpressionError(f"unexpected {token.text!r}", token.position)

        if token.kind == "ident":
            if token.text in self.TYPE_OPERATORS:
                self._advance()
                self._postfix()
                return
            if token.text == "typeof":
                self._advance()
                self._qualified_name()
                return
            if token.text == "infer":
                self._advance()
                self._expect_ident()
                return
            if token.text == "new" or (token.text == "abstract" and self._peek(1).text == "new"):
                self._accept("abstract")
                self._advance()
                self._function_type()
                return
            if token.text == "import" and self._peek(1).text == "(":
                self._import_type()
                return
            self._type_reference()
            return

        found = "end of type expression" if token.kind == "end" else repr(token.text)
        raise TypeExpressionError(f"expected a type, found {found}", token.position)

    def _qualified_name(self) -> None:
        self._expect_ident()
        while self._accept("."):
            self._expect_ident()

    def _type_reference(self) -> None:
        """Name, Ns.Name, Name<A, B>."""
        self._qualified_name()
        self._type_arguments()

    def _type_arguments(self) -> None:
        if self._accept("<"):
            self._type()
            while self._accept(","):
                self._type()
            self._expect(">")

    def _import_type(self) -> None:
        """import('./module'), optionally followed by .Name<A>."""
        self._expect("import")
        self._expect("(")
        token = self._peek()
        if token.kind != "string":
            raise TypeExpressionError("expected a module path", token.position)
        self._advance()
        self._expect(")")
        while self._accept("."):
            self._expect_ident()
        self._type_arguments()

    def _type_parameters(self) -> None:
        self._expect("<")
        while True:
            self._expect_ident()
            if self._accept("extends"):
                self._type()
            if self._accept("="):
                self._type()
            if not self._accept(","):
                break
        self._expect(">")

    def _parenthesized_or_function(self) -> None:
        """Tell `(A | B)` apart from `(a: A) => B` by trying the function form first."""
        start = self.index
        try:
            self._function_type()
            return
        except TypeExpressionError:
            self.index = start
        self._expect("(")
        self._type()
        self._expect(")")

    def _function_type(self) -> None:
        """(param: T, ...rest: U[]) => R"""
        self._expect("(")
        if not self._at(")"):
            self._parameter()
            while self._accept(","):
                if self._at(")"):
                    break
                self._parameter()
        self._expect(")")
        self._expect("=>")
        self._type()

    def _parameter(self) -> None:
        self._accept("...")
        self._expect_ident()
        self._accept("?")
        if self._accept(":"):
            self._type()

    def _object_type(self) -> None:
        """{ a: T; readonly b?: U, [key: string]: V; m(x: T): U }"""
        self._expect("{")
        while not self._at("}"):
            self._member()
            if not (self._accept(";") or self._accept(",")):
                break
        self._expect("}")

    def _member(self) -> None:
        if self._at_mapped_member():
            self._mapped_member()
            return

        if self._at("readonly") and (self._peek(1).kind in ("ident", "string") or self._peek(1).text == "["):
            self._advance()

        token = self._peek()
        if token.kind == "punct" and token.text == "[":
            # Index signature
            self._advance()
            self._expect_ident()
            self._expect(":")
            self._type()
            self._expect("]")
            self._expect(":")
            self._type()
            return

        if token.kind == "punct" and token.text in ("(", "<"):
            # Call signature
            if token.text == "<":
                self._type_parameters()
            self._signature_tail()
            return

        if token.kind in ("ident", "string", "number"):
            self._advance()
        else:
            raise TypeExpressionError(f"expected a member name, found {token.text!r}", token.position)

        self._accept("?")
        if self._at("(") or self._at("<"):
            # Method signature
            if self._at("<"):
                self._type_parameters()
            self._signature_tail()
            return
        self._expect(":")
        self._type()

    def _at_mapped_member(self) -> bool:
        offset = 0
        if self._peek(offset).text in ("+", "-"):
            offset += 1
        if self._peek(offset).text == "readonly":
            offset += 1
        return self._peek(offset).text == "[" and self._peek(offset + 1).kind == "ident" and self._peek(offset + 2).text == "in"

    def _mapped_member(self) -> None:
        """[K in T as U]: V, with +/- readonly and ? modifiers."""
        if self._peek().text in ("+", "-"):
            self._advance()
            self._expect("readonly")
        else:
            self._accept("readonly")
        self._expect("[")
        self._expect_ident()
        self._expect("in")
        self._type()
        if self._accept("as"):
            self._type()
        self._expect("]")
        if self._peek().text in ("+", "-"):
            self._advance()
            self._expect("?")
        else:
            self._accept("?")
        if self._accept(":"):
            self._type()

    def _signature_tail(self) -> None:
        self._expect("(")
        if not self._at(")"):
            self._parameter()
            while self._accept(","):
                if self._at(")"):
                    break
                self._parameter()
        self._expect(")")
        if self._accept(":"):
            self._type()

    def _tuple_type(self) -> None:
        """[A, B?, ...C[]]"""
        self._expect("[")
        while not self._at("]"):
            self._accept("...")
            # Labeled element: [name: T]
            if self._peek().kind == "ident" and (self._peek(1).text == ":" or (self._peek(1).text == "?" and self._peek(2).text == ":")):
                self._advance()
                self._accept("?")
                self._expect(":")
            self._type()
            self._accept("?")
            if not self._accept(","):
                break
        self._expect("]")


def parse_type_expression(text: str) -> None:
    """
    Parse a TypeScript type expression.

    Args:
        text: The type expression

    Raises:
        TypeExpressionError: If the text is not a valid type expression
    """
    TypeExpressionParser(text).parse()


def is_valid_type_expression(text: str) -> bool:
    """Whether text parses as a TypeScript type expression."""
    try:
        parse_type_expression(text)
    except TypeExpressionError:
        return False
    return True
