"""Shared fixtures for scim_codegen tests."""

import copy

import pytest

from scim_codegen.codegen.core.config import GeneratorConfig
from scim_codegen.codegen.core.schema import (
    AttributeType,
    ResourceSchema,
    SchemaAttribute,
)
from scim_codegen.codegen.core.templates import create_template_engine
from scim_codegen.codegen.languages.java import JavaResourceGenerator, StructureAssembler
from scim_codegen.codegen.registry import META_SCHEMA_ID, SchemaRegistry

USER_DOCUMENT = {
    "schemas": [META_SCHEMA_ID],
    "id": "urn:ietf:params:scim:schemas:core:2.0:User",
    "name": "User",
    "description": "User Account",
    "attributes": [
        {
            "name": "userName",
            "type": "string",
            "multiValued": False,
            "description": "Unique identifier for the User.",
            "required": True,
            "caseExact": False,
            "mutability": "readWrite",
            "returned": "default",
            "uniqueness": "server",
        },
        {
            "name": "active",
            "type": "boolean",
            "multiValued": False,
            "required": False,
        },
        {
            "name": "name",
            "type": "complex",
            "multiValued": False,
            "description": "The components of the user's real name.",
            "required": False,
            "subAttributes": [
                {"name": "givenName", "type": "string", "multiValued": False},
                {"name": "familyName", "type": "string", "multiValued": False},
            ],
        },
    ],
}

GROUP_DOCUMENT = {
    "schemas": [META_SCHEMA_ID],
    "id": "urn:ietf:params:scim:schemas:core:2.0:Group",
    "name": "Group",
    "attributes": [
        {
            "name": "members",
            "type": "complex",
            "multiValued": True,
            "subAttributes": [
                {"name": "value", "type": "string", "multiValued": False},
            ],
        }
    ],
}


def simple(name, attribute_type=AttributeType.STRING, **kwargs):
    return SchemaAttribute(name=name, type=attribute_type, **kwargs)


def complex_(name, children, **kwargs):
    return SchemaAttribute(
        name=name, type=AttributeType.COMPLEX, sub_attributes=list(children), **kwargs
    )


@pytest.fixture
def user_document():
    return copy.deepcopy(USER_DOCUMENT)


@pytest.fixture
def group_document():
    return copy.deepcopy(GROUP_DOCUMENT)


@pytest.fixture
def user_schema():
    return ResourceSchema(name="User", attributes=[simple("userName")])


@pytest.fixture
def group_schema():
    return ResourceSchema(
        name="Group", attributes=[complex_("members", [simple("value")])]
    )


@pytest.fixture
def config():
    return GeneratorConfig()


@pytest.fixture
def assembler(config):
    return StructureAssembler(create_template_engine(), config)


@pytest.fixture
def generator(config):
    return JavaResourceGenerator(config)


@pytest.fixture
def registry():
    return SchemaRegistry()
