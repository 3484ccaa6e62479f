import pytest

from scim_codegen.codegen import (
    generate_class_from_schema,
    generate_from_document,
)
from scim_codegen.codegen.core.config import (
    EXAMPLE_CONFIG,
    ConfigManager,
    GeneratorConfig,
)
from scim_codegen.codegen.core.generator import (
    GenerationResult,
    MissingSchemaNameError,
    UnsupportedAttributeTypeError,
    generate_code,
)
from scim_codegen.codegen.core.schema import AttributeType, ResourceSchema
from scim_codegen.codegen.languages.java import JavaResourceGenerator

from .conftest import complex_, simple

HEADER = (
    "package ???;\n"
    "\n"
    "import java.util.Arrays;\n"
    "import java.util.List;\n"
    "import java.util.Optional;\n"
    "import java.util.Set;\n"
    "import java.time.Instant;\n"
    "import de.captaingoldfish.scim.sdk.common.resources.ResourceNode;\n"
    "import de.captaingoldfish.scim.sdk.common.resources.base.ScimObjectNode;\n"
    "\n"
)

EXPECTED_USER = HEADER + (
    "/**  */\n"
    "public class User extends ResourceNode\n"
    "{\n"
    "  public User(String userName)\n"
    "  {\n"
    "    setUserName(userName);\n"
    "  }\n"
    "\n"
    "  public Optional<String> getUserName()\n"
    "  {\n"
    '    return getStringAttribute("userName");\n'
    "  }\n"
    "\n"
    "  public void setUserName(String userName)\n"
    "  {\n"
    '    setAttribute("userName", userName);\n'
    "  }\n"
    "}"
)


def test_user_scenario(generator, user_schema):
    assert generator.generate(user_schema) == EXPECTED_USER


def test_group_scenario(generator, group_schema):
    code = generator.generate(group_schema)

    assert "public class Group extends ResourceNode" in code
    assert "  public Group(Members members)\n  {\n    setMembers(members);\n  }" in code
    assert "  public static class Members extends ScimObjectNode" in code
    assert "    public Members(String value)" in code
    assert code.count("public Optional<String> getValue()") == 1
    assert code.count("public void setValue(String value)") == 1
    assert "getMembers()" not in code
    assert code.endswith("  }\n}")


def test_empty_schema(generator):
    code = generator.generate(ResourceSchema(name="empty", description="Nothing"))
    assert "/** Nothing */\npublic class Empty extends ResourceNode" in code
    assert code.endswith("{\n  public Empty()\n  {\n  }\n}")
    assert "Optional<" not in code.split("public class")[1]


def test_generation_is_idempotent(generator, group_schema):
    assert generator.generate(group_schema) == generator.generate(group_schema)
    assert JavaResourceGenerator().generate(group_schema) == generator.generate(
        group_schema
    )


def test_missing_name_fails_without_partial_output(generator):
    schema = ResourceSchema(name=None, attributes=[simple("userName")])
    with pytest.raises(MissingSchemaNameError):
        generator.generate(schema)

    result = generate_code(generator, schema)
    assert result.success is False
    assert result.code == ""
    assert isinstance(result.exception, MissingSchemaNameError)


def test_configured_header():
    config = GeneratorConfig(
        package_name="com.example.scim",
        imports=["java.util.Optional"],
        base_type="CustomNode",
        indent_size=4,
    )
    code = JavaResourceGenerator(config).generate(
        ResourceSchema(name="device", attributes=[simple("serial")])
    )
    assert code.startswith(
        "package com.example.scim;\n\nimport java.util.Optional;\n\n/**  */\n"
        "public class Device extends CustomNode\n{\n    public Device(String serial)\n"
    )
    assert '        return getStringAttribute("serial");' in code


def test_strict_types_fail_for_any():
    generator = JavaResourceGenerator(GeneratorConfig(unknown_type_policy="strict"))
    schema = ResourceSchema(
        name="Blob", attributes=[simple("payload", AttributeType.ANY)]
    )
    with pytest.raises(UnsupportedAttributeTypeError):
        generator.generate(schema)

    result = generate_code(generator, schema)
    assert not result.success
    assert "payload" in result.error_message


class TestGenerateCode:
    def test_result_metadata(self, generator, group_schema):
        result = generate_code(generator, group_schema)

        assert isinstance(result, GenerationResult)
        assert result.success
        assert result.metadata == {
            "language": "java",
            "file_extension": ".java",
            "schema_name": "Group",
            "attribute_count": 1,
            "nested_type_count": 1,
            "max_depth": 2,
        }

    def test_warnings(self, generator):
        schema = ResourceSchema(
            name="Odd",
            attributes=[
                complex_("empty", []),
                simple("anything", AttributeType.ANY),
            ],
        )
        result = generate_code(generator, schema)

        assert result.success
        assert "Complex attribute Odd.empty has no sub-attributes" in result.warnings
        assert "Attribute Odd.anything has type 'any'" in result.warnings

    def test_no_attributes_warning(self, generator):
        result = generate_code(generator, ResourceSchema(name="Bare"))
        assert result.warnings == ["Schema 'Bare' has no attributes"]

    def test_plain_type_override_warning(self):
        generator = JavaResourceGenerator(
            GeneratorConfig(type_overrides={"integer": "Integer"})
        )
        schema = ResourceSchema(
            name="Counter", attributes=[simple("count", AttributeType.INTEGER)]
        )
        result = generate_code(generator, schema)

        assert result.success
        assert "Optional<Integer> getCount()" in result.code
        assert any("getLongAttribute" in w for w in result.warnings)

    def test_format_code(self, generator):
        assert generator.format_code("a  \n\n\n\n\nb\t") == "a\n\n\nb"


def test_generate_class_from_schema(user_schema):
    assert generate_class_from_schema(user_schema) == EXPECTED_USER


def test_generate_from_document(user_document, registry):
    result = generate_from_document(user_document, registry=registry)

    assert result.success
    assert registry.get_resource_schema(user_document["id"]) is not None
    code = result.code
    assert "/** User Account */\npublic class User extends ResourceNode" in code
    assert "public User(String userName, Boolean active, Name name)" in code
    assert "/** Unique identifier for the User. */" in code
    assert "/** The components of the user's real name. */" in code
    assert "public static class Name extends ScimObjectNode" in code
    assert "public Name(String givenName, String familyName)" in code


def test_generate_from_document_without_validation(registry):
    document = {"name": "Loose", "attributes": [{"name": "x", "type": "string"}]}
    result = generate_from_document(document, registry=registry, validate=False)

    assert result.success
    assert "public Loose(String x)" in result.code
    assert registry.list_resource_schemas() == []


def test_example_config_reads_overridden_type_consistently():
    config = ConfigManager().get_config(EXAMPLE_CONFIG)
    generator = JavaResourceGenerator(config)
    schema = ResourceSchema(
        name="Counter", attributes=[simple("count", AttributeType.INTEGER)]
    )
    result = generate_code(generator, schema)

    assert result.success
    assert "public Optional<Integer> getCount()" in result.code
    assert 'return getIntegerAttribute("count");' in result.code
    assert "getLongAttribute" not in result.code
    assert result.warnings == []
