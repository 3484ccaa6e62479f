"""
Template engine wrapper for code generation.

Provides a simple interface for Jinja2 template rendering
with common utilities for code generation.
"""

from typing import Dict, Any, Optional

from jinja2 import Environment, DictLoader, select_autoescape


class TemplateError(Exception):
    """Exception raised for template-related errors."""

    pass


class TemplateEngine:
    """Wrapper for Jinja2 template engine with code generation utilities."""

    def __init__(self, templates: Optional[Dict[str, str]] = None):
        """
        Initialize template engine.

        Args:
            templates: In-memory templates keyed by name
        """
        self._env = Environment(
            loader=DictLoader(dict(templates or {})),
            # Generated code is never HTML; generic types contain '<'
            autoescape=select_autoescape(["html", "xml"], default_for_string=False),
            lstrip_blocks=True,
        )

        self._env.filters["indent"] = self._indent_filter
        self._env.filters["javadoc"] = self._javadoc_filter

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a template with the given context.

        Args:
            template_name: Name of a registered template
            context: Variables to pass to template

        Returns:
            Rendered template content
        """
        try:
            template = self._env.get_template(template_name)
            return template.render(**context)
        except Exception as e:
            raise TemplateError(
                f"Failed to render template {template_name}: {str(e)}"
            ) from e

    def add_template(self, name: str, content: str):
        """
        Add an in-memory template.

        Args:
            name: Template name
            content: Template content
        """
        self._env.loader.mapping[name] = content

    def template_exists(self, name: str) -> bool:
        """Check if a template is registered."""
        return name in self._env.loader.mapping

    # Template filters for code generation

    def _indent_filter(self, value: str, spaces: int = 4) -> str:
        """Indent all non-blank lines in a string."""
        indent = " " * spaces
        lines = str(value).split("\n")
        return "\n".join(indent + line if line.strip() else line for line in lines)

    def _javadoc_filter(self, value: str) -> str:
        """Keep text from closing the surrounding doc comment."""
        return str(value).replace("*/", "*&#47;")


# Built-in Java templates

JAVA_GETTER_TEMPLATE = (
    "{% if description %}/** {{ description | javadoc }} */\n{% endif %}"
    "public Optional<{{ java_type }}> get{{ method_suffix }}()\n"
    "{\n"
    '{{ pad }}return {{ read_method }}("{{ attribute_name }}");\n'
    "}"
)

JAVA_SETTER_TEMPLATE = (
    "public void set{{ method_suffix }}({{ java_type }} {{ parameter_name }})\n"
    "{\n"
    '{{ pad }}setAttribute("{{ attribute_name }}", {{ parameter_name }});\n'
    "}"
)

JAVA_CONSTRUCTOR_TEMPLATE = (
    "public {{ name }}({{ parameters | join(', ') }})\n"
    "{\n"
    "{% for call in setter_calls %}{{ pad }}{{ call }}\n{% endfor %}"
    "}"
)

JAVA_NESTED_TYPE_TEMPLATE = (
    "{% if description %}/** {{ description | javadoc }} */\n{% endif %}"
    "public static class {{ name }} extends {{ base_type }}\n"
    "{\n"
    "{{ body | indent(indent_size) }}\n"
    "}"
)

JAVA_DOCUMENT_TEMPLATE = (
    "package {{ package_name }};\n"
    "\n"
    "{% for module in imports %}import {{ module }};\n{% endfor %}"
    "\n"
    "/** {{ description | javadoc }} */\n"
    "public class {{ class_name }} extends {{ base_type }}\n"
    "{\n"
    "{{ body | indent(indent_size) }}\n"
    "}\n"
)

JAVA_TEMPLATES = {
    "getter.java.j2": JAVA_GETTER_TEMPLATE,
    "setter.java.j2": JAVA_SETTER_TEMPLATE,
    "constructor.java.j2": JAVA_CONSTRUCTOR_TEMPLATE,
    "nested_type.java.j2": JAVA_NESTED_TYPE_TEMPLATE,
    "document.java.j2": JAVA_DOCUMENT_TEMPLATE,
}


def create_template_engine(templates: Optional[Dict[str, str]] = None) -> TemplateEngine:
    """
    Create a template engine preloaded with the built-in Java templates.

    Args:
        templates: Extra or replacement templates keyed by name

    Returns:
        Configured TemplateEngine
    """
    engine = TemplateEngine(JAVA_TEMPLATES)
    for name, content in (templates or {}).items():
        engine.add_template(name, content)
    return engine
