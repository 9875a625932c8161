"""
CAML Query Builder - translate LoopBack-style filters into CAML views.

Main entry point is ``translate`` (or ``QueryTranslator`` for repeated use
against one model).
"""

from caml_builder.config import TranslatorSettings
from caml_builder.core.errors import (
    CamlBuilderError,
    UnknownFieldError,
    InvalidOperandError,
    MalformedClauseError,
    UnknownOperatorError,
    InvalidOrderError,
    ModelDefinitionError,
)
from caml_builder.core.models import Filter, FieldDescriptor, ModelMetadata
from caml_builder.query.translator import QueryTranslator, translate
from caml_builder.schema.model_builder import ModelBuilder, ModelRegistry

__all__ = [
    "TranslatorSettings",
    "CamlBuilderError",
    "UnknownFieldError",
    "InvalidOperandError",
    "MalformedClauseError",
    "UnknownOperatorError",
    "InvalidOrderError",
    "ModelDefinitionError",
    "Filter",
    "FieldDescriptor",
    "ModelMetadata",
    "QueryTranslator",
    "translate",
    "ModelBuilder",
    "ModelRegistry",
]
