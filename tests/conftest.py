"""Shared test fixtures."""

import pytest

from protoscan.profiles import C, JAVA, PYTHON, TYPESCRIPT, create_default_registry


@pytest.fixture
def java():
    return JAVA


@pytest.fixture
def typescript():
    return TYPESCRIPT


@pytest.fixture
def python_profile():
    return PYTHON


@pytest.fixture
def c_profile():
    return C


@pytest.fixture
def registry():
    return create_default_registry()


@pytest.fixture
def scenario_a():
    """Marker annotation, no parameters, body opener."""
    return "@Preliminary\npublic void run() {\n    work();\n}\n"


@pytest.fixture
def scenario_b():
    """Key/value annotation over three lines before an empty parameter list."""
    return (
        "@Copyright(\n"
        "    owner = \"Acme Corp\",\n"
        "    year  =  2024)\n"
        "public Widget()  { }\n"
    )


@pytest.fixture
def scenario_c():
    """Four parameters, some carrying annotations of their own."""
    return (
        "public void save(@Named(\"first\") String first,\n"
        "                 @Named(\"last\") String last,\n"
        "                 @DefaultValue(value = \"10\") @Min(1) Integer count,\n"
        "                 boolean notify) {\n"
    )


@pytest.fixture
def scenario_d():
    """Three stacked clauses plus one with an array value, then the declaration."""
    return (
        "@Deprecated\n"
        "@SuppressWarnings(\"unchecked\")\n"
        "@Author(name = \"Ada\", tags = {\"core\", \"io\"})\n"
        "@Tags({\"fast\", \"stable\"})\n"
        "public abstract List<String> names(int limit);\n"
    )


@pytest.fixture
def unbalanced_annotation():
    """Annotation argument clause that never closes."""
    return "@Copyright(\"Acme\"\npublic void run();\n"


@pytest.fixture
def profile_yaml(tmp_path):
    """A YAML profile file with one derived and one standalone profile."""
    path = tmp_path / "languages.yaml"
    path.write_text(
        "languages:\n"
        "  kotlin:\n"
        "    extends: java\n"
        "    extensions: [\".kt\"]\n"
        "    parameter_style: pascal\n"
        "    type_separator: \":\"\n"
        "    return_type_separators: [\":\"]\n"
        "    declaration_keywords: [fun, class, val, var]\n"
        "  mini:\n"
        "    extensions: [\".mini\"]\n"
        "    annotation_prefix: null\n"
        "    terminators: [\";\"]\n"
    )
    return path
