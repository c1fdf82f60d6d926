import pytest
from graphql import GraphQLSyntaxError, build_schema, introspection_from_schema

from graphql_schema_to_ts import PipelineGenerator
from graphql_schema_to_ts.pipeline.schema_ast import TypeKind, TypeReference, parse_introspection, parse_sdl

SDL = """
\"\"\"A person\"\"\"
type User implements Node {
  id: ID!
  tags: [String!]
  friends(first: Int = 10, after: String): [User]!
}

interface Node {
  id: ID!
}

enum Role {
  ADMIN
  \"\"\"Read only\"\"\"
  GUEST
}

input UserFilter {
  role: Role = GUEST
  name: String
}

union Entity = User

scalar Date

type Query {
  user(filter: UserFilter): User
}
"""


@pytest.fixture
def graph():
    return parse_sdl(SDL)


class TestParseSdl:
    def test_introspection_types_skipped(self, graph):
        assert not any(type_def.name.startswith("__") for type_def in graph)

    def test_kinds(self, graph):
        assert graph.get("User").kind == TypeKind.OBJECT
        assert graph.get("Node").kind == TypeKind.INTERFACE
        assert graph.get("Role").kind == TypeKind.ENUM
        assert graph.get("UserFilter").kind == TypeKind.INPUT_OBJECT
        assert graph.get("Entity").kind == TypeKind.UNION
        assert graph.get("Date").kind == TypeKind.SCALAR

    def test_contains(self, graph):
        assert "User" in graph
        assert "Missing" not in graph
        assert graph.get("Missing") is None

    def test_description(self, graph):
        assert graph.get("User").description == "A person"

    def test_field_order(self, graph):
        assert [field.name for field in graph.get("User").fields] == ["id", "tags", "friends"]

    def test_type_references(self, graph):
        fields = {field.name: field for field in graph.get("User").fields}
        assert fields["id"].type_ref == TypeReference.to("ID", nullable=False)
        assert fields["tags"].type_ref == TypeReference.list_of(TypeReference.to("String", nullable=False))
        assert fields["friends"].type_ref == TypeReference.list_of(TypeReference.to("User"), nullable=False)
        assert fields["friends"].type_ref.leaf_name == "User"
        assert fields["friends"].type_ref.is_list

    def test_arguments(self, graph):
        friends = graph.get("User").fields[2]
        assert [argument.name for argument in friends.arguments] == ["first", "after"]
        assert friends.arguments[0].has_default
        assert not friends.arguments[1].has_default
        assert all(argument.is_input_position for argument in friends.arguments)
        assert not friends.is_input_position

    def test_input_fields(self, graph):
        role, name = graph.get("UserFilter").fields
        assert role.is_input_position and role.has_default
        assert not name.has_default

    def test_enum_values(self, graph):
        values = graph.get("Role").values
        assert [value.name for value in values] == ["ADMIN", "GUEST"]
        assert values[1].description == "Read only"
        assert values[0].literal == "ADMIN"

    def test_interfaces_and_members(self, graph):
        assert graph.get("User").interfaces == ("Node",)
        assert graph.get("Entity").members == ("User",)

    def test_of_kind(self, graph):
        assert [type_def.name for type_def in graph.of_kind(TypeKind.ENUM)] == ["Role"]

    def test_invalid_sdl(self):
        with pytest.raises(GraphQLSyntaxError):
            parse_sdl("type Query {")


class TestDefaultValues:
    SDL = "input F { limit: Int! = 10, q: String }\ntype Query { a(first: Int! = 5, after: String): Int }"

    def test_sdl_defaults(self):
        graph = parse_sdl(self.SDL)
        limit, q = graph.get("F").fields
        first, after = graph.get("Query").fields[0].arguments
        assert limit.has_default and first.has_default
        assert not q.has_default and not after.has_default

    def test_introspection_defaults(self):
        graph = parse_introspection(introspection_from_schema(build_schema(self.SDL)))
        assert [field.has_default for field in graph.get("F").fields] == [True, False]
        assert [argument.has_default for argument in graph.get("Query").fields[0].arguments] == [True, False]

    def test_defaulted_values_are_optional(self):
        out = PipelineGenerator(parse_sdl(self.SDL)).generate()
        assert "  limit?: Scalars['Int'];" in out
        assert "  first?: Scalars['Int'];" in out


class TestParseIntrospection:
    def test_matches_sdl(self, graph):
        introspection = introspection_from_schema(build_schema(SDL))
        from_introspection = parse_introspection(introspection)
        for name in ("User", "Node", "Role", "UserFilter", "Entity", "Date", "Query"):
            assert from_introspection.get(name) == graph.get(name)

    def test_data_envelope(self):
        introspection = introspection_from_schema(build_schema(SDL))
        assert "User" in parse_introspection({"data": introspection})
