"""CAML adapter: node tree, where compiler, emitters and XML serializer."""

from caml_builder.adapters.caml.nodes import (
    CamlNode,
    Comparison,
    Logical,
    MultiValueComparison,
    TypedValue,
)
from caml_builder.adapters.caml.serializer import XmlSerializer
from caml_builder.adapters.caml.where_compiler import WhereCompiler, format_value
from caml_builder.adapters.caml.emitters import CamlEmitter, coerce_limit

__all__ = [
    "CamlNode",
    "Comparison",
    "Logical",
    "MultiValueComparison",
    "TypedValue",
    "XmlSerializer",
    "WhereCompiler",
    "format_value",
    "CamlEmitter",
    "coerce_limit",
]
