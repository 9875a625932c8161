"""
Emitters for the ``<ViewFields>``, ``<OrderBy>`` and ``<RowLimit>`` elements.
"""

import logging
import re
from typing import Any, List, Optional

from caml_builder.adapters.caml.serializer import XmlSerializer
from caml_builder.config import TranslatorSettings
from caml_builder.core.interfaces import IFieldResolver
from caml_builder.core.models import OrderSpec

logger = logging.getLogger(__name__)

LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class CamlEmitter:
    """
    Builds the non-condition parts of a CAML view.

    Each method returns an XML fragment, or an empty string when the
    element should be left out.
    """

    def __init__(
        self,
        resolver: IFieldResolver,
        settings: Optional[TranslatorSettings] = None,
        serializer: Optional[XmlSerializer] = None,
    ):
        """
        Initialize emitter.

        Args:
            resolver: Field resolver for the model being queried
            settings: Translator settings (identity field for default order)
            serializer: XML serializer; a default one when omitted
        """
        self.resolver = resolver
        self.settings = settings or TranslatorSettings()
        self.serializer = serializer or XmlSerializer()

    def view_fields(self, fields: List[str]) -> str:
        """
        Build ``<ViewFields>`` with one ``<FieldRef>`` per property.

        Args:
            fields: Property names; empty means all columns

        Returns:
            XML fragment or empty string
        """
        if not fields:
            return ""
        field_refs = [
            self.serializer.field_ref(self.resolver.resolve_column(f)) for f in fields
        ]
        return self.serializer.render({"ViewFields": {"FieldRef": field_refs}})

    def order_by(self, specs: List[OrderSpec]) -> str:
        """
        Build ``<OrderBy>``.

        With no specs the view is ordered by the identity column, newest
        first, so unordered queries still return rows in a stable order.

        Args:
            specs: Parsed order specs

        Returns:
            XML fragment
        """
        if not specs:
            identity = self.resolver.resolve_column(self.settings.identity_field)
            field_refs = [self.serializer.field_ref(identity, "False")]
        else:
            field_refs = [
                self.serializer.field_ref(
                    self.resolver.resolve_column(spec.field),
                    self._ascending(spec.ascending),
                )
                for spec in specs
            ]
        return self.serializer.render({"OrderBy": {"FieldRef": field_refs}})

    @staticmethod
    def _ascending(ascending: Optional[bool]) -> Optional[str]:
        if ascending is None:
            return None
        return "TRUE" if ascending else "FALSE"

    def row_limit(self, limit: Any) -> str:
        """
        Build ``<RowLimit>``.

        Args:
            limit: Row cap; coerced to an integer

        Returns:
            XML fragment, or empty string for missing, non-positive or
            unparseable limits
        """
        rows = coerce_limit(limit)
        if rows is None:
            if limit is not None:
                logger.warning("Ignoring row limit %r; no RowLimit emitted", limit)
            return ""
        return self.serializer.render({"RowLimit": str(rows)})


def coerce_limit(limit: Any) -> Optional[int]:
    """
    Coerce a row limit to a positive integer.

    Text is read like JavaScript ``parseInt``: leading whitespace and an
    optional sign, then the leading digits; anything after them is ignored
    (``"10abc"`` and ``"1.5"`` give 10 and 1). Floats are truncated.
    Returns None for anything else, including booleans and values below 1.
    """
    if limit is None or isinstance(limit, bool):
        return None
    if isinstance(limit, str):
        match = LEADING_INT.match(limit)
        if match is None:
            return None
        rows = int(match.group(1))
    else:
        try:
            rows = int(limit)
        except (TypeError, ValueError, OverflowError):
            return None
    return rows if rows > 0 else None
