"""
Shared data models for the CAML query builder.
"""

from enum import Enum
from typing import Any, Dict, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field


class SemanticType(str, Enum):
    """Declared type of a model property."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    DATE = "date"
    ANY = "any"


class CamlType(str, Enum):
    """Value-type tags accepted in a CAML ``<Value Type="...">`` attribute."""

    TEXT = "Text"
    NOTE = "Note"
    NUMBER = "Number"
    INTEGER = "Integer"
    COUNTER = "Counter"
    CURRENCY = "Currency"
    BOOLEAN = "Boolean"
    DATETIME = "DateTime"
    CHOICE = "Choice"
    MULTI_CHOICE = "MultiChoice"
    LOOKUP = "Lookup"
    LOOKUP_MULTI = "LookupMulti"
    USER = "User"
    USER_MULTI = "UserMulti"
    URL = "URL"
    GUID = "Guid"
    CALCULATED = "Calculated"
    COMPUTED = "Computed"


class Operator(str, Enum):
    """Comparison operators of the where-filter grammar."""

    EQ = "eq"
    NEQ = "neq"
    GT = "gt"
    GTE = "gte"
    LT = "lt"
    LTE = "lte"
    INQ = "inq"
    IN = "in"
    NIN = "nin"
    LIKE = "like"
    CONTAINS = "contains"
    INC = "inc"


class Connective(str, Enum):
    """Logical connectives of the where-filter grammar."""

    AND = "and"
    OR = "or"


class FieldDescriptor(BaseModel):
    """Metadata for one model property."""

    model_config = ConfigDict(frozen=True)

    type: SemanticType = SemanticType.ANY
    column_name: Optional[str] = None  # physical column override
    data_type: Optional[CamlType] = None  # explicit CAML type override
    is_id: bool = False


class ModelMetadata(BaseModel):
    """A named model and its ordered property descriptors."""

    model_config = ConfigDict(frozen=True)

    name: str
    fields: Dict[str, FieldDescriptor] = Field(default_factory=dict)
    list_name: Optional[str] = None  # list title in the store

    @property
    def identity_property(self) -> Optional[str]:
        """Name of the property flagged as the model's id, if any."""
        for name, descriptor in self.fields.items():
            if descriptor.is_id:
                return name
        return None


class Condition(BaseModel):
    """Leaf of a where-clause tree: one field/operator/value triple."""

    model_config = ConfigDict(frozen=True)

    field: str
    operator: Operator
    value: Any = None


class LogicalClause(BaseModel):
    """An ``and``/``or`` node over two or more child clauses."""

    model_config = ConfigDict(frozen=True)

    connective: Connective
    clauses: Tuple[Union["Condition", "LogicalClause"], ...]


WhereClause = Union[Condition, LogicalClause]

LogicalClause.model_rebuild()


class OrderSpec(BaseModel):
    """One parsed order expression. ``ascending`` None omits the attribute."""

    model_config = ConfigDict(frozen=True)

    field: str
    ascending: Optional[bool] = None


class Filter(BaseModel):
    """
    Caller-supplied query filter.

    Parts are kept in their raw JSON shape; the translator validates them so
    grammar problems surface as query-building errors.
    """

    fields: Any = None
    where: Any = None
    order: Any = None
    limit: Any = None
