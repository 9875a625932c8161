"""
Query translation facade.

Combines the where compiler and the element emitters into one CAML
``<View>`` document.
"""

import logging
from typing import Any, Dict, Mapping, Optional, Union

from caml_builder.adapters.caml.emitters import CamlEmitter
from caml_builder.adapters.caml.serializer import XmlSerializer
from caml_builder.adapters.caml.where_compiler import WhereCompiler
from caml_builder.config import TranslatorSettings
from caml_builder.core.interfaces import IFieldResolver, IWhereCompiler
from caml_builder.core.models import Filter, ModelMetadata
from caml_builder.query.filter_builder import FilterBuilder
from caml_builder.schema.field_resolver import FieldResolver

logger = logging.getLogger(__name__)

FilterInput = Union[Filter, Mapping[str, Any], None]


class QueryTranslator:
    """
    Translates filters for one model into CAML.

    The translator keeps no per-call state, so one instance can serve
    concurrent callers as long as each passes its own filter.
    """

    def __init__(
        self,
        model: ModelMetadata,
        settings: Optional[TranslatorSettings] = None,
        resolver: Optional[IFieldResolver] = None,
        where_compiler: Optional[IWhereCompiler] = None,
    ):
        """
        Initialize query translator.

        Args:
            model: Metadata of the model being queried
            settings: Translator settings; defaults when omitted
            resolver: Field resolver; a FieldResolver over ``model`` by default
            where_compiler: Where compiler; a WhereCompiler by default
        """
        self.model = model
        self.settings = settings or TranslatorSettings()
        self.resolver = resolver or FieldResolver(model, self.settings)

        serializer = XmlSerializer()
        self.where_compiler = where_compiler or WhereCompiler(self.resolver, serializer)
        self.emitter = CamlEmitter(self.resolver, self.settings, serializer)
        self.filter_builder = FilterBuilder()

    def translate(self, filter: FilterInput = None) -> str:
        """
        Translate a filter to a CAML view.

        Args:
            filter: Filter model or plain filter dict

        Returns:
            ``<View>[ViewFields]<Query>[Where][OrderBy]</Query>[RowLimit]</View>``

        Raises:
            CamlBuilderError: If any part of the filter is invalid
        """
        parsed = self._coerce_filter(filter)
        view_xml = (
            f"<View>{self.compile_view_fields(parsed.fields)}"
            f"<Query>{self.compile_where(parsed.where)}"
            f"{self.compile_order_by(parsed.order)}</Query>"
            f"{self.compile_row_limit(parsed.limit)}</View>"
        )
        logger.debug("Translated filter for %s: %s", self.model.name, view_xml)
        return view_xml

    def build_query(self, filter: FilterInput = None) -> Dict[str, str]:
        """
        Build the query payload for the store's item query call.

        Returns:
            ``{"ViewXml": <view>}``
        """
        return {"ViewXml": self.translate(filter)}

    def compile_where(self, where: Any) -> str:
        """Build ``<Where>`` from a raw where object; empty string when absent."""
        return self.where_compiler.compile(self.filter_builder.build_where(where))

    def compile_order_by(self, order: Any) -> str:
        """Build ``<OrderBy>`` from a raw order expression or list."""
        return self.emitter.order_by(self.filter_builder.build_order(order))

    def compile_view_fields(self, fields: Any) -> str:
        """Build ``<ViewFields>``; empty string when no fields are given."""
        return self.emitter.view_fields(
            self.filter_builder.build_fields(fields, self.model)
        )

    def compile_row_limit(self, limit: Any) -> str:
        """Build ``<RowLimit>``; empty string for missing or invalid limits."""
        return self.emitter.row_limit(limit)

    @staticmethod
    def _coerce_filter(filter: FilterInput) -> Filter:
        if filter is None:
            return Filter()
        if isinstance(filter, Filter):
            return filter
        return Filter.model_validate(dict(filter))


def translate(
    model: ModelMetadata,
    filter: FilterInput = None,
    settings: Optional[TranslatorSettings] = None,
) -> str:
    """
    Translate a filter for a model to a CAML view.

    Args:
        model: Metadata of the model being queried
        filter: Filter model or plain filter dict
        settings: Translator settings; defaults when omitted

    Returns:
        CAML ``<View>`` XML
    """
    return QueryTranslator(model, settings).translate(filter)
