"""
Field resolution against model metadata.

Maps logical property names to physical column names and CAML value types.
"""

from typing import Optional

from caml_builder.config import TranslatorSettings
from caml_builder.core.errors import UnknownFieldError
from caml_builder.core.models import (
    CamlType,
    FieldDescriptor,
    ModelMetadata,
    SemanticType,
)
from caml_builder.schema.type_mappings import TypeMapper


class FieldResolver:
    """
    Resolves property names for one model.

    Unknown properties pass through ``resolve_column`` unchanged so system
    columns can be projected and ordered on, but ``resolve_type`` refuses
    them: a typed comparison against a missing column is never generated.

    The configured identity field (``ID`` by default) resolves through the
    property the model flags with ``id: true``, so its column override and
    declared type apply to the default order and to identity conditions.
    """

    def __init__(
        self, model: ModelMetadata, settings: Optional[TranslatorSettings] = None
    ):
        """
        Initialize field resolver.

        Args:
            model: Model metadata (referenced, never modified)
            settings: Translator settings; defaults when omitted
        """
        self.model = model
        self.settings = settings or TranslatorSettings()

    def _descriptor(self, field_name: str) -> Optional[FieldDescriptor]:
        descriptor = self.model.fields.get(field_name)
        if descriptor is None and field_name == self.settings.identity_field:
            identity = self.model.identity_property
            if identity is not None:
                return self.model.fields[identity]
        return descriptor

    def resolve_column(self, field_name: str) -> str:
        """
        Get the physical column name for a property.

        Args:
            field_name: Logical property name

        Returns:
            Column override from the model, or the name unchanged
        """
        descriptor = self._descriptor(field_name)
        if descriptor is not None and descriptor.column_name:
            return descriptor.column_name
        return field_name

    def resolve_type(self, field_name: str) -> CamlType:
        """
        Get the CAML value type for a property.

        Args:
            field_name: Logical property name

        Returns:
            CAML type tag

        Raises:
            UnknownFieldError: If the property is neither defined on the
                model nor the identity field
        """
        descriptor = self._descriptor(field_name)
        if descriptor is None:
            if field_name == self.settings.identity_field:
                return self.settings.identity_type
            raise UnknownFieldError(field_name, self.model.name)

        if descriptor.data_type is not None:
            return descriptor.data_type
        if descriptor.is_id and descriptor.type == SemanticType.ANY:
            return self.settings.identity_type
        return TypeMapper.get_caml_type(descriptor.type, self.settings.number_type)
