"""
Where-clause compiler.

Turns a typed where-clause tree into a CAML node tree and renders it as a
``<Where>`` element. CAML logical elements take exactly two operands, so an
``and``/``or`` over n clauses becomes n-1 nested nodes leaning right::

    and: [a, b, c, d]  ->  And(a, And(b, And(c, d)))
"""

import logging
from datetime import date, datetime, timezone
from functools import reduce
from typing import Any, Dict, List, Optional

from caml_builder.adapters.caml.nodes import (
    CamlNode,
    Comparison,
    Logical,
    MultiValueComparison,
    TypedValue,
)
from caml_builder.adapters.caml.serializer import XmlSerializer
from caml_builder.core.errors import InvalidOperandError, UnknownOperatorError
from caml_builder.core.interfaces import IFieldResolver
from caml_builder.core.models import (
    Condition,
    Connective,
    LogicalClause,
    Operator,
    WhereClause,
)

logger = logging.getLogger(__name__)


class WhereCompiler:
    """
    Compiles where-clause trees to CAML.

    Implements the IWhereCompiler interface. Compilation is a pure function
    of the tree and the resolver; the input tree is only read.
    """

    COMPARISON_TAGS: Dict[Operator, str] = {
        Operator.EQ: "Eq",
        Operator.NEQ: "Neq",
        Operator.GT: "Gt",
        Operator.GTE: "Geq",
        Operator.LT: "Lt",
        Operator.LTE: "Leq",
        Operator.LIKE: "BeginsWith",
        Operator.CONTAINS: "Contains",
        Operator.INC: "Includes",
    }

    MULTI_VALUE_TAGS: Dict[Operator, str] = {
        Operator.INQ: "In",
        Operator.IN: "In",
        Operator.NIN: "NotIncludes",
    }

    LOGICAL_TAGS: Dict[Connective, str] = {
        Connective.AND: "And",
        Connective.OR: "Or",
    }

    def __init__(
        self, resolver: IFieldResolver, serializer: Optional[XmlSerializer] = None
    ):
        """
        Initialize where compiler.

        Args:
            resolver: Field resolver for the model being queried
            serializer: XML serializer; a default one when omitted
        """
        self.resolver = resolver
        self.serializer = serializer or XmlSerializer()

    def compile(self, clause: Optional[WhereClause]) -> str:
        """
        Compile a where-clause tree to a ``<Where>`` fragment.

        Args:
            clause: Root clause, or None

        Returns:
            ``<Where>...</Where>``, or an empty string when there is no clause
        """
        if clause is None:
            return ""
        xml = self.serializer.render_where(self.build_node(clause))
        logger.debug("Compiled where clause: %s", xml)
        return xml

    def build_node(self, clause: WhereClause) -> CamlNode:
        """
        Build the CAML node for a clause.

        Raises:
            UnknownFieldError: If a condition references an undefined property
            InvalidOperandError: If an operator gets a value of the wrong shape
        """
        if isinstance(clause, LogicalClause):
            return self._build_logical(clause)
        return self._build_condition(clause)

    def _build_logical(self, clause: LogicalClause) -> Logical:
        tag = self.LOGICAL_TAGS[clause.connective]
        nodes: List[CamlNode] = [self.build_node(child) for child in clause.clauses]
        # Fold from the right so the first clause stays outermost
        return reduce(
            lambda nested, node: Logical(tag, node, nested),
            reversed(nodes[:-1]),
            nodes[-1],
        )

    def _build_condition(self, condition: Condition) -> CamlNode:
        operator = condition.operator
        value_type = self.resolver.resolve_type(condition.field)
        field_ref = self.resolver.resolve_column(condition.field)

        if operator in self.MULTI_VALUE_TAGS:
            if not isinstance(condition.value, (list, tuple)):
                raise InvalidOperandError(
                    f"Invalid '{operator.value}' values. Must be an array."
                )
            if not condition.value:
                raise InvalidOperandError(
                    f"Invalid '{operator.value}' values. Must be a non-empty array."
                )
            return MultiValueComparison(
                tag=self.MULTI_VALUE_TAGS[operator],
                field_ref=field_ref,
                values=tuple(
                    TypedValue(format_value(v), value_type) for v in condition.value
                ),
            )

        if operator not in self.COMPARISON_TAGS:
            raise UnknownOperatorError(operator.value)
        if isinstance(condition.value, (list, tuple)):
            raise InvalidOperandError(
                f"Operator '{operator.value}' expects a single value, got an array."
            )
        return Comparison(
            tag=self.COMPARISON_TAGS[operator],
            field_ref=field_ref,
            value=TypedValue(format_value(condition.value), value_type),
        )


def format_value(value: Any) -> str:
    """
    Format a literal as CAML value text.

    Booleans become 1/0, dates become ISO-8601 UTC with milliseconds
    (naive datetimes are taken as UTC), integral floats drop the fraction.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return _format_utc(value.astimezone(timezone.utc))
    if isinstance(value, date):
        return _format_utc(datetime(value.year, value.month, value.day, tzinfo=timezone.utc))
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _format_utc(value: datetime) -> str:
    return f"{value:%Y-%m-%dT%H:%M:%S}.{value.microsecond // 1000:03d}Z"
