"""Unit tests for the pipeline type registry."""

import pytest

from fspec.exceptions import UnknownPipelineTypeError
from fspec.models.parameter_types import StaticListParameterType, ValidUrlParameterType
from fspec.models.pipeline_type import PipelineType
from fspec.services import pipeline_registry
from fspec.services.pipeline_registry import (
    CANONICAL_PARAMETER_SCHEMAS,
    SEED_PIPELINE_TYPES,
    canonical_parameter_schemas,
    canonical_specification,
    specification_for,
)


class TestCanonicalTable:
    """Tests for the hard-coded seed table."""

    def test_http_web_endpoint(self):
        assert canonical_parameter_schemas("HttpWebEndpoint") == (("Url", True, "ValidUrl"),)

    def test_static_list(self):
        assert canonical_parameter_schemas(PipelineType.StaticList) == (
            ("Values", True, "StaticList"),
        )

    def test_every_kind_has_an_entry(self):
        assert set(CANONICAL_PARAMETER_SCHEMAS) == set(PipelineType)

    def test_seed_order(self):
        assert SEED_PIPELINE_TYPES == (PipelineType.HttpWebEndpoint, PipelineType.StaticList)

    def test_parameter_names_unique_per_kind(self):
        for rows in CANONICAL_PARAMETER_SCHEMAS.values():
            names = [name for name, _, _ in rows]
            assert len(names) == len(set(names))

    def test_unknown_kind(self):
        with pytest.raises(UnknownPipelineTypeError):
            canonical_parameter_schemas("FtpDrop")

    def test_kind_without_entry_fails_fast(self, monkeypatch):
        monkeypatch.delitem(pipeline_registry.CANONICAL_PARAMETER_SCHEMAS, PipelineType.StaticList)

        with pytest.raises(UnknownPipelineTypeError, match="StaticList"):
            canonical_parameter_schemas(PipelineType.StaticList)
        with pytest.raises(UnknownPipelineTypeError):
            specification_for("StaticList")


class TestSpecificationFor:
    """Tests for specification_for and canonical_specification."""

    @pytest.mark.parametrize("kind_name", ["HttpWebEndpoint", "StaticList"])
    def test_returns_empty_specification(self, kind_name):
        spec = specification_for(kind_name)

        assert spec.name == kind_name
        assert spec.parameter_types == []

    @pytest.mark.parametrize("kind_name", ["FtpDrop", "httpwebendpoint", ""])
    def test_unknown_kind(self, kind_name):
        with pytest.raises(UnknownPipelineTypeError):
            specification_for(kind_name)

    def test_canonical_specification_http(self):
        spec = canonical_specification(PipelineType.HttpWebEndpoint)

        assert len(spec.parameter_types) == 1
        url = spec.parameter_types[0]
        assert (url.name, url.required) == ("Url", True)
        assert isinstance(url.parameter_type, ValidUrlParameterType)

    def test_canonical_specification_static_list(self):
        values = canonical_specification("StaticList").parameter_types[0]

        assert (values.name, values.required) == ("Values", True)
        assert isinstance(values.parameter_type, StaticListParameterType)
