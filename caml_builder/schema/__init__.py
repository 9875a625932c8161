"""Model metadata, type mapping and field resolution."""

from caml_builder.schema.type_mappings import TypeMapper
from caml_builder.schema.model_builder import ModelBuilder, ModelRegistry
from caml_builder.schema.field_resolver import FieldResolver

__all__ = ["TypeMapper", "ModelBuilder", "ModelRegistry", "FieldResolver"]
