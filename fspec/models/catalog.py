"""
Catalog table models.

SQLModel tables for the catalog metadata, the pipeline type catalog and the
pipeline instance tables. Table and column names are part of the on-disk
format and must stay compatible with catalogs written by earlier versions.
"""

from datetime import UTC, datetime

from sqlalchemy import UniqueConstraint
from sqlmodel import Field, SQLModel


class FspecConfig(SQLModel, table=True):
    """Catalog metadata: the directory a catalog was created for, and when."""

    __tablename__ = "fspec_config"

    fspec_directory: str = Field(primary_key=True)
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))


class FspecPipelineType(SQLModel, table=True):
    """Persisted pipeline kind."""

    __tablename__ = "fspec_pipeline_type"
    __table_args__ = {"sqlite_autoincrement": True}

    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(max_length=100, unique=True)


class FspecPipelineParameterType(SQLModel, table=True):
    """Persisted parameter schema of a pipeline kind."""

    __tablename__ = "fspec_pipeline_parameter_type"
    __table_args__ = {"sqlite_autoincrement": True}

    id: int | None = Field(default=None, primary_key=True)
    pipeline_type_id: int = Field(foreign_key="fspec_pipeline_type.id")
    parameter_name: str = Field(max_length=1024, unique=True)
    required: bool
    parameter_type: str = Field(max_length=100)


class FspecPipeline(SQLModel, table=True):
    """A named pipeline of a given kind."""

    __tablename__ = "fspec_pipeline"
    __table_args__ = {"sqlite_autoincrement": True}

    id: int | None = Field(default=None, primary_key=True)
    name: str | None = Field(default=None, max_length=1024)
    pipeline_type_id: int = Field(foreign_key="fspec_pipeline_type.id")
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))


class FspecPipelineParameterValue(SQLModel, table=True):
    """Concrete value bound to one declared parameter of a pipeline."""

    __tablename__ = "fspec_pipeline_parameter_value"
    __table_args__ = (
        UniqueConstraint("pipeline_id", "parameter_type_id"),
        {"sqlite_autoincrement": True},
    )

    id: int | None = Field(default=None, primary_key=True)
    pipeline_id: int = Field(foreign_key="fspec_pipeline.id")
    parameter_type_id: int = Field(foreign_key="fspec_pipeline_parameter_type.id")
    parameter_value: str | None = None


CONFIG_TABLES = (FspecConfig,)
PIPELINE_TYPE_TABLES = (FspecPipelineType, FspecPipelineParameterType)
PIPELINE_TABLES = (FspecPipeline, FspecPipelineParameterValue)
