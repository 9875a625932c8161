"""
Translator configuration.

Reads configuration from environment variables by default:
- CAML_IDENTITY_FIELD: Name of the store's row identity column (default "ID")
- CAML_IDENTITY_TYPE: CAML type of the identity column (default "Number")
- CAML_NUMBER_TYPE: CAML type used for number properties (default "Number")
"""

import os

from pydantic import BaseModel

from caml_builder.core.models import CamlType


class TranslatorSettings(BaseModel):
    """Settings shared by the field resolver and the emitters."""

    identity_field: str = "ID"
    identity_type: CamlType = CamlType.NUMBER
    number_type: CamlType = CamlType.NUMBER

    @classmethod
    def from_env(cls) -> "TranslatorSettings":
        """
        Build settings from environment variables.

        Returns:
            Settings with unset variables left at their defaults

        Raises:
            ValueError: If a type variable is not a known CAML type
        """
        values = {}
        identity_field = os.getenv("CAML_IDENTITY_FIELD")
        identity_type = os.getenv("CAML_IDENTITY_TYPE")
        number_type = os.getenv("CAML_NUMBER_TYPE")

        if identity_field:
            values["identity_field"] = identity_field
        if identity_type:
            values["identity_type"] = identity_type
        if number_type:
            values["number_type"] = number_type

        return cls(**values)
