"""
Naming utilities for code generation.

All type, constructor and accessor names go through ``capitalize`` so the
derivations cannot drift apart.
"""

from typing import Optional, Set

UNKNOWN_CLASS_NAME = "Unknown"

JAVA_RESERVED_WORDS = {
    "abstract", "assert", "boolean", "break", "byte", "case", "catch", "char",
    "class", "const", "continue", "default", "do", "double", "else", "enum",
    "extends", "final", "finally", "float", "for", "goto", "if", "implements",
    "import", "instanceof", "int", "interface", "long", "native", "new",
    "package", "private", "protected", "public", "return", "short", "static",
    "strictfp", "super", "switch", "synchronized", "this", "throw", "throws",
    "transient", "try", "void", "volatile", "while", "true", "false", "null",
}


def capitalize(name: str) -> str:
    """Upper-case the first letter and leave the rest untouched ('userName' -> 'UserName')."""
    if not name:
        return name
    return name[0].upper() + name[1:]


def class_name_for(name: Optional[str]) -> str:
    """Capitalized type name, or the 'Unknown' placeholder when the name is absent."""
    if not name:
        return UNKNOWN_CLASS_NAME
    return capitalize(name)


class JavaNameSanitizer:
    """Keeps generated parameter names clear of Java keywords."""

    def __init__(self, reserved_words: Set[str] = None, suffix_on_conflict: str = "_"):
        """
        Initialize name sanitizer.

        Args:
            reserved_words: Words that cannot be used as identifiers
            suffix_on_conflict: Suffix appended to a conflicting name
        """
        self.reserved_words = (
            reserved_words if reserved_words is not None else JAVA_RESERVED_WORDS
        )
        self.suffix_on_conflict = suffix_on_conflict

    def is_reserved(self, name: str) -> bool:
        return name in self.reserved_words

    def parameter_name(self, name: str) -> str:
        """
        Get the parameter name for an attribute.

        Args:
            name: Attribute name as declared in the schema

        Returns:
            The name itself, or the name with the conflict suffix for keywords
        """
        if self.is_reserved(name):
            return f"{name}{self.suffix_on_conflict}"
        return name
