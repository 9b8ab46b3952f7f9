"""Unit tests for parameter schemas and pipeline type specifications."""

import pytest

from fspec.exceptions import (
    InvalidParameterValueError,
    MalformedCatalogStateError,
    UnknownPipelineTypeError,
    UnrecognizedParameterTypeError,
)
from fspec.models.parameter_schema import ParameterSchema
from fspec.models.parameter_types import StaticListParameterType, ValidUrlParameterType
from fspec.models.pipeline_type import PipelineType, PipelineTypeSpecification


def _http_spec(with_optional: bool = False) -> PipelineTypeSpecification:
    schemas = [ParameterSchema.from_raw("Url", "ValidUrl", True)]
    if with_optional:
        schemas.append(ParameterSchema.from_raw("Mirrors", "StaticList", False))
    return PipelineTypeSpecification.from_name("HttpWebEndpoint").with_parameter_types(schemas)


# ===================================================================
# ParameterSchema
# ===================================================================


class TestParameterSchema:
    """Tests for ParameterSchema construction and validation."""

    def test_from_raw_decodes_type(self):
        schema = ParameterSchema.from_raw("Url", "ValidUrl", True)

        assert schema.name == "Url"
        assert schema.required is True
        assert isinstance(schema.parameter_type, ValidUrlParameterType)
        assert schema.type_name == "ValidUrl"

    def test_from_raw_unknown_type(self):
        with pytest.raises(UnrecognizedParameterTypeError):
            ParameterSchema.from_raw("Pattern", "Regex", False)

    def test_from_raw_empty_name(self):
        with pytest.raises(MalformedCatalogStateError, match="Invalid parameter schema ''"):
            ParameterSchema.from_raw("", "ValidUrl", False)

    def test_model_validate_uses_type_name_discriminator(self):
        schema = ParameterSchema.model_validate(
            {"name": "Values", "required": False, "parameter_type": {"type_name": "StaticList"}}
        )
        assert isinstance(schema.parameter_type, StaticListParameterType)

    def test_validate_value_tags_parameter_name(self):
        schema = ParameterSchema.from_raw("Url", "ValidUrl", True)

        with pytest.raises(InvalidParameterValueError) as excinfo:
            schema.validate_value("nope")

        assert excinfo.value.parameter_name == "Url"
        assert "'Url'" in str(excinfo.value)

    def test_render(self):
        assert ParameterSchema.from_raw("Values", "StaticList", True).render() == (
            "Values (required=true, type=StaticList)"
        )
        assert ParameterSchema.from_raw("Mirrors", "StaticList", False).render() == (
            "Mirrors (required=false, type=StaticList)"
        )


# ===================================================================
# PipelineType / PipelineTypeSpecification
# ===================================================================


class TestPipelineType:
    """Tests for the PipelineType enumeration."""

    def test_from_name(self):
        assert PipelineType.from_name("StaticList") is PipelineType.StaticList

    def test_from_name_unknown(self):
        with pytest.raises(UnknownPipelineTypeError) as excinfo:
            PipelineType.from_name("FtpDrop")

        assert excinfo.value.kind_name == "FtpDrop"


class TestPipelineTypeSpecification:
    """Tests for PipelineTypeSpecification."""

    def test_from_name_has_no_parameters(self):
        spec = PipelineTypeSpecification.from_name("HttpWebEndpoint")

        assert spec.pipeline_type is PipelineType.HttpWebEndpoint
        assert spec.parameter_types == []

    def test_with_parameter_types_keeps_order(self):
        spec = _http_spec(with_optional=True)
        assert [p.name for p in spec.parameter_types] == ["Url", "Mirrors"]

    def test_get_parameter(self):
        spec = _http_spec()
        assert spec.get_parameter("Url") is spec.parameter_types[0]
        assert spec.get_parameter("Missing") is None

    def test_render_block(self):
        assert str(_http_spec()) == (
            "HttpWebEndpoint (1 params)\n    Url (required=true, type=ValidUrl)"
        )

    def test_render_without_parameters(self):
        assert PipelineTypeSpecification.from_name("StaticList").render() == "StaticList (0 params)"


class TestValidateParameters:
    """Tests for PipelineTypeSpecification.validate_parameters."""

    def test_valid_values(self):
        values = {"Url": "https://example.com/data.json"}
        assert _http_spec().validate_parameters(values) == values

    def test_optional_parameter_may_be_omitted(self):
        result = _http_spec(with_optional=True).validate_parameters({"Url": "https://a.example"})
        assert result == {"Url": "https://a.example"}

    def test_values_are_normalized(self):
        result = _http_spec(with_optional=True).validate_parameters(
            {"Url": "https://a.example", "Mirrors": '["https://b.example"]'}
        )
        assert result["Mirrors"] == ["https://b.example"]

    def test_missing_required_parameter(self):
        with pytest.raises(InvalidParameterValueError, match="required parameter is missing"):
            _http_spec().validate_parameters({})

    def test_undeclared_parameter(self):
        with pytest.raises(InvalidParameterValueError, match="does not declare parameter"):
            _http_spec().validate_parameters({"Url": "https://a.example", "Token": "x"})

    def test_invalid_value(self):
        with pytest.raises(InvalidParameterValueError) as excinfo:
            _http_spec().validate_parameters({"Url": "not a url"})

        assert excinfo.value.parameter_name == "Url"
