import pytest

from scim_codegen.codegen.core.generator import (
    GeneratorError,
    UnsupportedAttributeTypeError,
)
from scim_codegen.codegen.core.schema import AttributeType
from scim_codegen.codegen.languages.java.types import JavaType, JavaTypeMapper

from .conftest import complex_, simple


@pytest.mark.parametrize(
    "attribute_type, expected",
    [
        (AttributeType.STRING, JavaType("String", "getStringAttribute")),
        (AttributeType.REFERENCE, JavaType("String", "getStringAttribute")),
        (AttributeType.BOOLEAN, JavaType("Boolean", "getBooleanAttribute")),
        (AttributeType.INTEGER, JavaType("Long", "getLongAttribute")),
        (AttributeType.DECIMAL, JavaType("Double", "getDoubleAttribute")),
        (AttributeType.DATE_TIME, JavaType("Instant", "getDateTimeAttribute")),
        (AttributeType.BINARY, JavaType("byte[]", "getBinaryAttribute")),
    ],
)
def test_supported_types(attribute_type, expected):
    assert JavaTypeMapper().map_attribute(simple("x", attribute_type)) == expected


def test_any_falls_back_to_string():
    mapper = JavaTypeMapper()
    assert mapper.map_attribute(simple("x", AttributeType.ANY)).name == "String"


def test_unrecognized_raw_tag_falls_back_to_string():
    mapper = JavaTypeMapper()
    assert mapper.map_attribute(simple("x", "number")).name == "String"


def test_strict_policy_rejects_unsupported_types():
    mapper = JavaTypeMapper(unknown_type_policy="strict")
    with pytest.raises(UnsupportedAttributeTypeError) as excinfo:
        mapper.map_attribute(simple("payload", AttributeType.ANY))

    assert excinfo.value.attribute_name == "payload"
    assert "'any'" in str(excinfo.value)
    assert mapper.map_attribute(simple("ok")).name == "String"


def test_invalid_policy():
    with pytest.raises(GeneratorError):
        JavaTypeMapper(unknown_type_policy="lenient")


def test_overrides_replace_declared_type():
    mapper = JavaTypeMapper(type_overrides={"integer": "Integer"})
    java_type = mapper.map_attribute(simple("count", AttributeType.INTEGER))
    assert java_type == JavaType("Integer", "getLongAttribute")


def test_complex_attributes_have_no_simple_type():
    with pytest.raises(GeneratorError):
        JavaTypeMapper().map_attribute(complex_("name", [simple("givenName")]))


def test_object_override_names_read_method():
    mapper = JavaTypeMapper(
        type_overrides={
            "integer": {"java_type": "Integer", "read_method": "getIntegerAttribute"}
        }
    )
    java_type = mapper.map_attribute(simple("count", AttributeType.INTEGER))
    assert java_type == JavaType("Integer", "getIntegerAttribute")
    assert mapper.override_warnings() == []


def test_plain_override_with_mismatched_reader_is_reported():
    mapper = JavaTypeMapper(type_overrides={"integer": "Integer", "string": "String"})
    warnings = mapper.override_warnings()
    assert len(warnings) == 1
    assert "'integer' -> 'Integer'" in warnings[0]
    assert "getLongAttribute" in warnings[0]
