"""
Abstract interfaces between the query builder layers.

The facade only talks to a field resolver and a where compiler through these
protocols, so either side can be swapped (for instance a resolver backed by
live list metadata instead of model definitions).
"""

from typing import Optional, Protocol

from caml_builder.core.models import CamlType, WhereClause


class IFieldResolver(Protocol):
    """
    Resolve logical property names to physical columns and CAML types.
    """

    def resolve_column(self, field_name: str) -> str:
        """
        Get the physical column name for a property.

        Args:
            field_name: Logical property name

        Returns:
            Column override from the model, or the name unchanged
        """
        ...

    def resolve_type(self, field_name: str) -> CamlType:
        """
        Get the CAML value type for a property.

        Args:
            field_name: Logical property name

        Returns:
            CAML type tag used in ``<Value Type="...">``

        Raises:
            UnknownFieldError: If the property is not defined on the model
        """
        ...


class IWhereCompiler(Protocol):
    """
    Render a typed where-clause tree as a CAML ``<Where>`` fragment.
    """

    def compile(self, clause: Optional[WhereClause]) -> str:
        """
        Compile a where-clause tree.

        Args:
            clause: Root of the tree, or None for no condition

        Returns:
            ``<Where>...</Where>`` XML, or an empty string
        """
        ...
