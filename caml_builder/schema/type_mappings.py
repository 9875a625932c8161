"""
Type mapping utilities for converting declared property types to CAML types.
"""

from datetime import date, datetime
from typing import Any, Dict, Optional

from caml_builder.core.models import CamlType, SemanticType


class TypeMapper:
    """Maps declared property types to semantic types and CAML value types."""

    # Declared type names as they appear in model definitions
    DECLARED_TYPE_MAP = {
        "string": SemanticType.STRING,
        "text": SemanticType.STRING,
        "number": SemanticType.NUMBER,
        "integer": SemanticType.NUMBER,
        "float": SemanticType.NUMBER,
        "boolean": SemanticType.BOOLEAN,
        "bool": SemanticType.BOOLEAN,
        "date": SemanticType.DATE,
        "datetime": SemanticType.DATE,
    }

    # Python classes accepted in place of a type name
    PYTHON_TYPE_MAP = {
        str: SemanticType.STRING,
        int: SemanticType.NUMBER,
        float: SemanticType.NUMBER,
        bool: SemanticType.BOOLEAN,
        datetime: SemanticType.DATE,
        date: SemanticType.DATE,
    }

    # Default CAML type per semantic type; numbers are configurable
    CAML_TYPE_MAP: Dict[SemanticType, CamlType] = {
        SemanticType.STRING: CamlType.TEXT,
        SemanticType.NUMBER: CamlType.NUMBER,
        SemanticType.BOOLEAN: CamlType.BOOLEAN,
        SemanticType.DATE: CamlType.DATETIME,
        SemanticType.ANY: CamlType.TEXT,
    }

    @classmethod
    def normalize_type(cls, declared: Any) -> SemanticType:
        """
        Normalize a declared property type to a semantic type.

        Args:
            declared: Type name ("String", "number", ...), Python class, or None

        Returns:
            Semantic type, ``SemanticType.ANY`` when unrecognized
        """
        if declared is None:
            return SemanticType.ANY
        if isinstance(declared, SemanticType):
            return declared
        if isinstance(declared, type):
            return cls.PYTHON_TYPE_MAP.get(declared, SemanticType.ANY)
        if isinstance(declared, str):
            return cls.DECLARED_TYPE_MAP.get(declared.lower(), SemanticType.ANY)
        return SemanticType.ANY

    @classmethod
    def get_caml_type(
        cls, semantic_type: SemanticType, number_type: Optional[CamlType] = None
    ) -> CamlType:
        """
        Get the default CAML value type for a semantic type.

        Args:
            semantic_type: Normalized property type
            number_type: CAML type to use for numbers (Number or Integer)

        Returns:
            CAML type tag
        """
        if semantic_type is SemanticType.NUMBER and number_type is not None:
            return number_type
        return cls.CAML_TYPE_MAP.get(semantic_type, CamlType.TEXT)

    @classmethod
    def parse_caml_type(cls, name: str) -> CamlType:
        """
        Look up a CAML type tag by name, ignoring case.

        Args:
            name: Tag name such as "Text" or "datetime"

        Returns:
            Matching CAML type

        Raises:
            ValueError: If the name is not a known CAML type
        """
        for caml_type in CamlType:
            if caml_type.value.lower() == name.lower():
                return caml_type
        raise ValueError(f"Unknown CAML data type '{name}'.")
