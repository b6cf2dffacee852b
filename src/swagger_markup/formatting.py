"""Display strings for type references."""

from swagger_markup.markup.builder import MarkupLanguage
from swagger_markup.parser.base import ArrayType, PrimitiveType, RefType

NOT_FOUND = "NOT FOUND"


def get_type(type_ref, language: MarkupLanguage) -> str:
    """Render a TypeRef for a table cell, or NOT_FOUND for anything unknown."""
    if isinstance(type_ref, PrimitiveType):
        if type_ref.enum:
            return f"enum ({', '.join(type_ref.enum)})"
        if type_ref.format:
            return f"{type_ref.name} ({type_ref.format})"
        return type_ref.name
    if isinstance(type_ref, RefType):
        if language.supports_cross_references:
            return f"<<{type_ref.name}>>"
        return type_ref.name
    if isinstance(type_ref, ArrayType):
        return f"{get_type(type_ref.items, language)} {type_ref.qualifier}"
    return NOT_FOUND
