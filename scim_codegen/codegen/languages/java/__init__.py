"""
Java code generator module.

Generates SCIM SDK resource classes (ResourceNode subclasses with nested
ScimObjectNode types) from resource schemas.
"""

from .assembler import StructureAssembler
from .builders import AccessorPairBuilder, GeneratedFragment, NestedGroupBuilder
from .generator import JavaResourceGenerator, create_java_generator
from .types import JavaType, JavaTypeMapper

__all__ = [
    "AccessorPairBuilder",
    "GeneratedFragment",
    "JavaResourceGenerator",
    "JavaType",
    "JavaTypeMapper",
    "NestedGroupBuilder",
    "StructureAssembler",
    "create_java_generator",
]
