"""Filter parsing and query translation."""

from caml_builder.query.filter_builder import FilterBuilder
from caml_builder.query.translator import QueryTranslator, translate

__all__ = ["FilterBuilder", "QueryTranslator", "translate"]
