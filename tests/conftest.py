"""Pytest configuration and fixtures for Kiln tests."""

import pytest

from kiln import PrintContext, Template, TemplateGenerator, load_unit


@pytest.fixture
def generator():
    """Create a TemplateGenerator with the default configuration."""
    return TemplateGenerator()


@pytest.fixture
def context():
    """Create an empty HTML PrintContext."""
    return PrintContext()


@pytest.fixture
def compile_unit():
    """Generate a unit and load its template class in one step."""

    def _compile(
        context: PrintContext,
        content: str = "",
        class_name: str = "Template_test",
        **kwargs,
    ) -> type[Template]:
        source = TemplateGenerator().generate(context, content, class_name, **kwargs)
        return load_unit(source, class_name)

    return _compile


def assert_in_order(source: str, *fragments: str) -> None:
    """Assert every fragment occurs in source, each after the previous one.

    Args:
        source: Generated unit source.
        fragments: Substrings expected in this order.
    """
    position = 0
    for fragment in fragments:
        found = source.find(fragment, position)
        assert found != -1, (
            f"Generated source missing fragment after offset {position}:\n"
            f"  Missing: {fragment!r}\n"
            f"  Source:\n{source}"
        )
        position = found + len(fragment)
