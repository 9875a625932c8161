"""
CAML XML serializer.

Renders node trees and element dictionaries with xmltodict. Output has no
XML declaration and no whitespace between elements, and empty elements are
self-closing (``<FieldRef Name="ID"/>``). Attribute order follows insertion
order, so the same input always yields the same string.
"""

from typing import Any, Dict, Optional

import xmltodict

from caml_builder.adapters.caml.nodes import (
    CamlNode,
    Comparison,
    Logical,
    MultiValueComparison,
    TypedValue,
)


class XmlSerializer:
    """Serializes CAML elements to canonical XML strings."""

    def render(self, document: Dict[str, Any]) -> str:
        """
        Render a single-root element dictionary.

        Args:
            document: xmltodict-style mapping (``@`` attributes, ``#text`` text)

        Returns:
            XML fragment
        """
        return xmltodict.unparse(
            document,
            full_document=False,
            short_empty_elements=True,
            pretty=False,
        )

    def render_where(self, node: CamlNode) -> str:
        """Render a node tree wrapped in ``<Where>``."""
        return self.render({"Where": self.to_element(node)})

    def to_element(self, node: CamlNode) -> Dict[str, Any]:
        """
        Convert a node to an xmltodict element mapping.

        Returns:
            ``{tag: body}`` with a single key
        """
        if isinstance(node, Comparison):
            return {
                node.tag: {
                    "FieldRef": self.field_ref(node.field_ref),
                    "Value": self.value(node.value),
                }
            }
        if isinstance(node, MultiValueComparison):
            return {
                node.tag: {
                    "FieldRef": self.field_ref(node.field_ref),
                    "Values": {"Value": [self.value(v) for v in node.values]},
                }
            }
        if isinstance(node, Logical):
            return {node.tag: self._pair(node.left, node.right)}
        raise TypeError(f"Cannot serialize {type(node).__name__} as CAML")

    def _pair(self, left: CamlNode, right: CamlNode) -> Dict[str, Any]:
        """Body of a logical element holding two operands in order."""
        left_tag, left_body = next(iter(self.to_element(left).items()))
        right_tag, right_body = next(iter(self.to_element(right).items()))
        # Sibling elements with the same tag must share one list entry
        if left_tag == right_tag:
            return {left_tag: [left_body, right_body]}
        return {left_tag: left_body, right_tag: right_body}

    @staticmethod
    def field_ref(name: str, ascending: Optional[str] = None) -> Dict[str, str]:
        """``<FieldRef Name="..." [Ascending="..."]/>`` body."""
        attrs = {"@Name": name}
        if ascending is not None:
            attrs["@Ascending"] = ascending
        return attrs

    @staticmethod
    def value(value: TypedValue) -> Dict[str, str]:
        """``<Value Type="...">text</Value>`` body."""
        return {"@Type": value.type.value, "#text": value.text}
