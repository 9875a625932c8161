"""
Parse raw JSON-shaped filter parts into typed structures.

Accepts the LoopBack filter grammar:

- where: ``{field: value}``, ``{field: {op: value}}`` or
  ``{"and"|"or": [clause, clause, ...]}``
- order: ``"field"``, ``"field ASC|DESC"`` or a list of those
- fields: a name, a list of names or an ``{name: bool}`` inclusion/exclusion map
"""

from collections.abc import Mapping
from typing import Any, List, Optional

from caml_builder.core.errors import (
    CamlBuilderError,
    InvalidOrderError,
    MalformedClauseError,
    UnknownOperatorError,
)
from caml_builder.core.models import (
    Condition,
    Connective,
    LogicalClause,
    ModelMetadata,
    Operator,
    OrderSpec,
    WhereClause,
)


class FilterBuilder:
    """
    Builds typed where-clause trees and order specs from raw filter parts.

    Parsing never modifies its input; the typed tree is built from new
    objects only.
    """

    LOGICAL_KEYS = {c.value: c for c in Connective}

    def build_where(self, where: Any) -> Optional[WhereClause]:
        """
        Build a where-clause tree.

        Args:
            where: Raw ``where`` object

        Returns:
            Root clause, or None when the filter has no condition

        Raises:
            MalformedClauseError: If the object violates the clause grammar
        """
        if where is None:
            return None
        if isinstance(where, Mapping) and len(where) == 0:
            return None
        return self._build_clause(where)

    def _build_clause(self, clause: Any) -> WhereClause:
        """Build one clause level (single-key object)."""
        if not isinstance(clause, Mapping):
            raise MalformedClauseError(
                f"Invalid 'where' clause {clause!r}. It must be an object."
            )
        if len(clause) != 1:
            raise MalformedClauseError(
                "Invalid 'where' clause. It must be in {key: value} format."
            )

        key, value = next(iter(clause.items()))
        if key in self.LOGICAL_KEYS:
            return self._build_logical(self.LOGICAL_KEYS[key], value)
        return self._build_condition(key, value)

    def _build_logical(self, connective: Connective, children: Any) -> LogicalClause:
        """Build an and/or node, preserving child order."""
        if not isinstance(children, (list, tuple)):
            raise MalformedClauseError(
                f"Invalid '{connective.value}' clause. Must be an array of conditions."
            )
        if len(children) < 2:
            raise MalformedClauseError(
                f"Invalid '{connective.value}' clause. "
                f"Must combine at least 2 conditions, got {len(children)}."
            )
        return LogicalClause(
            connective=connective,
            clauses=tuple(self._build_clause(child) for child in children),
        )

    def _build_condition(self, field: str, value: Any) -> Condition:
        """Build a leaf from ``{field: value}`` or ``{field: {op: value}}``."""
        if not isinstance(value, Mapping):
            return Condition(field=field, operator=Operator.EQ, value=value)

        if len(value) != 1:
            raise MalformedClauseError(f"Invalid condition {dict(value)!r}.")

        op_name, operand = next(iter(value.items()))
        return Condition(
            field=field, operator=self.parse_operator(op_name), value=operand
        )

    @staticmethod
    def parse_operator(name: Any) -> Operator:
        """
        Look up an operator by name, ignoring case.

        Raises:
            UnknownOperatorError: If the name is not a supported operator
        """
        try:
            return Operator(str(name).lower())
        except ValueError:
            raise UnknownOperatorError(str(name)) from None

    def build_order(self, order: Any) -> List[OrderSpec]:
        """
        Build order specs.

        Args:
            order: A single order expression or a list of them

        Returns:
            Parsed specs in the given order; empty when no order is set

        Raises:
            InvalidOrderError: If an expression is malformed
        """
        if order is None or (
            isinstance(order, (str, list, tuple, Mapping)) and len(order) == 0
        ):
            return []
        if isinstance(order, str):
            expressions = [order]
        elif isinstance(order, (list, tuple)):
            expressions = list(order)
        else:
            raise InvalidOrderError("Invalid order expression. Must be a string.")
        return [self._build_order_spec(expression) for expression in expressions]

    @staticmethod
    def _build_order_spec(expression: Any) -> OrderSpec:
        if not isinstance(expression, str):
            raise InvalidOrderError("Invalid order expression. Must be a string.")

        parts = expression.split()
        if len(parts) == 1:
            return OrderSpec(field=parts[0])
        if len(parts) == 2:
            direction = parts[1].upper()
            if direction == "ASC":
                return OrderSpec(field=parts[0], ascending=True)
            if direction == "DESC":
                return OrderSpec(field=parts[0], ascending=False)
            raise InvalidOrderError("Invalid order direction. Must be either ASC or DESC")
        raise InvalidOrderError(
            f"Invalid order expression '{expression}'. "
            "Must be in 'field' or 'field ASC|DESC' format."
        )

    @staticmethod
    def build_fields(fields: Any, model: ModelMetadata) -> List[str]:
        """
        Build the list of projected property names.

        Args:
            fields: A name, a list of names, or ``{name: bool}`` map
            model: Model used to expand an exclusion-only map

        Returns:
            Property names in output order; empty means all columns

        Raises:
            CamlBuilderError: If fields is not a name, list or map of names
        """
        if fields is None or (
            isinstance(fields, (str, list, tuple, Mapping)) and len(fields) == 0
        ):
            return []
        if isinstance(fields, str):
            return [fields]
        if isinstance(fields, Mapping):
            included = [name for name, keep in fields.items() if keep]
            if included:
                return included
            return [name for name in model.fields if fields.get(name, True)]
        if not isinstance(fields, (list, tuple)):
            raise CamlBuilderError(
                f"Invalid fields {fields!r}. Must be a name, an array of names or an object."
            )
        for name in fields:
            if not isinstance(name, str):
                raise CamlBuilderError(f"Invalid field name {name!r}. Must be a string.")
        return list(fields)
