"""Core interfaces, models and errors for the CAML query builder."""

from caml_builder.core.errors import (
    CamlBuilderError,
    UnknownFieldError,
    InvalidOperandError,
    MalformedClauseError,
    UnknownOperatorError,
    InvalidOrderError,
    ModelDefinitionError,
)
from caml_builder.core.interfaces import IFieldResolver, IWhereCompiler
from caml_builder.core.models import (
    SemanticType,
    CamlType,
    Operator,
    Connective,
    FieldDescriptor,
    ModelMetadata,
    Condition,
    LogicalClause,
    WhereClause,
    OrderSpec,
    Filter,
)

__all__ = [
    "CamlBuilderError",
    "UnknownFieldError",
    "InvalidOperandError",
    "MalformedClauseError",
    "UnknownOperatorError",
    "InvalidOrderError",
    "ModelDefinitionError",
    "IFieldResolver",
    "IWhereCompiler",
    "SemanticType",
    "CamlType",
    "Operator",
    "Connective",
    "FieldDescriptor",
    "ModelMetadata",
    "Condition",
    "LogicalClause",
    "WhereClause",
    "OrderSpec",
    "Filter",
]
