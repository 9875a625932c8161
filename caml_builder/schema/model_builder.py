"""
Model metadata builder.

Builds validated ModelMetadata from LoopBack-style model definitions, so
property metadata is checked once at registration instead of on every query.
"""

import logging
from collections.abc import Mapping
from typing import Any, Dict, Iterator, Optional

from pydantic import ValidationError

from caml_builder.core.errors import ModelDefinitionError
from caml_builder.core.models import FieldDescriptor, ModelMetadata
from caml_builder.schema.type_mappings import TypeMapper

logger = logging.getLogger(__name__)


class ModelBuilder:
    """
    Builds ModelMetadata from a model definition.

    A definition maps property names to property settings::

        {
            "firstName": {
                "type": "string",
                "sharepoint": {"columnName": "FirstName", "dataType": "Text"},
            },
            "id": {"type": "string", "id": True, "sharepoint": {"columnName": "GUID"}},
        }

    Model options may name the backing list: ``{"sharepoint": {"list": "Users"}}``.
    """

    CONNECTOR_KEY = "sharepoint"

    def __init__(
        self,
        name: str,
        properties: Dict[str, Any],
        options: Optional[Dict[str, Any]] = None,
    ):
        """
        Initialize model builder.

        Args:
            name: Model name
            properties: Property name -> property settings
            options: Model-level settings
        """
        self.name = name
        self.properties = properties
        self.options = options or {}
        self._model: Optional[ModelMetadata] = None

    def build(self) -> ModelMetadata:
        """
        Build model metadata.

        Returns:
            Frozen ModelMetadata

        Raises:
            ModelDefinitionError: If a property definition is invalid
        """
        if self._model is None:
            fields = {
                prop: self._build_descriptor(prop, settings)
                for prop, settings in self.properties.items()
            }
            connector_options = self.options.get(self.CONNECTOR_KEY) or {}
            self._model = ModelMetadata(
                name=self.name,
                fields=fields,
                list_name=connector_options.get("list"),
            )
            logger.debug("Built model %s with %d properties", self.name, len(fields))
        return self._model

    def _build_descriptor(self, prop: str, settings: Any) -> FieldDescriptor:
        """Build the descriptor for a single property."""
        if settings is None:
            settings = {}
        elif not isinstance(settings, Mapping):
            # Shorthand form: {"age": "number"}
            settings = {"type": settings}

        connector = settings.get(self.CONNECTOR_KEY) or {}
        if not isinstance(connector, Mapping):
            raise ModelDefinitionError(
                f"Invalid '{self.CONNECTOR_KEY}' settings for property "
                f"{prop} of {self.name}. Must be an object."
            )

        data_type = connector.get("dataType")
        if data_type is not None:
            try:
                data_type = TypeMapper.parse_caml_type(str(data_type))
            except ValueError as e:
                raise ModelDefinitionError(
                    f"Property {prop} of {self.name}: {e}"
                ) from e

        try:
            return FieldDescriptor(
                type=TypeMapper.normalize_type(settings.get("type")),
                column_name=connector.get("columnName"),
                data_type=data_type,
                is_id=bool(settings.get("id", False)),
            )
        except ValidationError as e:
            raise ModelDefinitionError(
                f"Invalid definition for property {prop} of {self.name}: {e}"
            ) from e


class ModelRegistry(Mapping):
    """
    Read-only mapping from model name to ModelMetadata.

    Models are added through ``register`` and never modified afterwards.
    """

    def __init__(self):
        self._models: Dict[str, ModelMetadata] = {}

    def register(
        self,
        name: str,
        properties: Dict[str, Any],
        options: Optional[Dict[str, Any]] = None,
    ) -> ModelMetadata:
        """
        Build and register a model.

        Args:
            name: Model name
            properties: Property definitions
            options: Model-level settings

        Returns:
            The registered ModelMetadata

        Raises:
            ModelDefinitionError: If the definition is invalid
        """
        model = ModelBuilder(name, properties, options).build()
        self._models[name] = model
        return model

    def __getitem__(self, name: str) -> ModelMetadata:
        return self._models[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._models)

    def __len__(self) -> int:
        return len(self._models)
