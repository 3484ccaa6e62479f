"""
Language-specific code generators.
"""

from .java import JavaResourceGenerator, create_java_generator

__all__ = ["JavaResourceGenerator", "create_java_generator"]
