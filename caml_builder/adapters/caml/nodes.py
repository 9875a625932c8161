"""
CAML node tree.

Intermediate form between a where-clause tree and XML. Logical nodes are
strictly binary, as CAML's ``<And>`` and ``<Or>`` are.
"""

from dataclasses import dataclass
from typing import Tuple, Union

from caml_builder.core.models import CamlType


@dataclass(frozen=True)
class TypedValue:
    """A ``<Value Type="...">text</Value>`` element."""

    text: str
    type: CamlType


@dataclass(frozen=True)
class Comparison:
    """Single-value comparison such as ``<Eq>``."""

    tag: str
    field_ref: str
    value: TypedValue


@dataclass(frozen=True)
class MultiValueComparison:
    """Comparison against a ``<Values>`` list, such as ``<In>``."""

    tag: str
    field_ref: str
    values: Tuple[TypedValue, ...]


@dataclass(frozen=True)
class Logical:
    """``<And>`` / ``<Or>`` with exactly two operands."""

    tag: str
    left: "CamlNode"
    right: "CamlNode"


CamlNode = Union[Comparison, MultiValueComparison, Logical]
