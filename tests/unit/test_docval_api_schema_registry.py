"""Unit tests for docval.api.schema_registry and output validation."""

import pytest
from pydantic import BaseModel, ValidationError

from docval.api._output_schemas.docs import DocsCheckOutput
from docval.api.schema_registry import SchemaRegistry, schema_registry
from docval.api.validate_output import validate_output


class _One(BaseModel):
    value: int


class _Two(BaseModel):
    value: int


def test_docs_check_schema_is_registered():
    assert ("docs", "check") in schema_registry
    assert schema_registry.get_output_schema("docs", "check") is DocsCheckOutput


def test_register_twice():
    registry = SchemaRegistry()
    registry.register_output_schema("docs", "x", _One)
    # Re-importing a module registers the same class again
    registry.register_output_schema("docs", "x", _One)

    with pytest.raises(ValueError, match="already _One"):
        registry.register_output_schema("docs", "x", _Two)
    assert registry.get_output_schema("docs", "y") is None


def test_output_schema_rejects_unknown_fields():
    with pytest.raises(ValidationError):
        DocsCheckOutput(
            root="/r",
            passed=True,
            guides_checked=0,
            total_links=0,
            resolved_links=0,
            external_links=0,
            skipped_links=0,
            broken_links=[],
            load_errors=[],
            unexpected=1,
        )


def test_validate_output_skips_functions_outside_api():
    def cmd_check():
        pass

    assert validate_output(cmd_check, {"anything": 1}) == {"anything": 1}
