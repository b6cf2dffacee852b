from swagger_markup.formatting import NOT_FOUND, get_type
from swagger_markup.markup.builder import MarkupLanguage
from swagger_markup.parser.base import ArrayType, PrimitiveType, RefType

ASCIIDOC = MarkupLanguage.ASCIIDOC
MARKDOWN = MarkupLanguage.MARKDOWN


class TestGetType:
    def test_primitive(self):
        assert get_type(PrimitiveType(name="string"), ASCIIDOC) == "string"

    def test_primitive_with_format(self):
        assert get_type(PrimitiveType(name="integer", format="int64"), MARKDOWN) == "integer (int64)"

    def test_enum(self):
        t = PrimitiveType(name="string", enum=["available", "sold"])
        assert get_type(t, ASCIIDOC) == "enum (available, sold)"

    def test_reference_with_cross_references(self):
        assert get_type(RefType(name="Pet"), ASCIIDOC) == "<<Pet>>"

    def test_reference_without_cross_references(self):
        assert get_type(RefType(name="Pet"), MARKDOWN) == "Pet"

    def test_array_of_primitives(self):
        assert get_type(ArrayType(items=PrimitiveType(name="string")), ASCIIDOC) == "string array"

    def test_array_of_references(self):
        t = ArrayType(items=RefType(name="Pet"))
        assert get_type(t, ASCIIDOC) == "<<Pet>> array"
        assert get_type(t, MARKDOWN) == "Pet array"

    def test_nested_arrays(self):
        t = ArrayType(items=ArrayType(items=PrimitiveType(name="integer")))
        assert get_type(t, MARKDOWN) == "integer array array"

    def test_unknown_shapes_degrade(self):
        assert get_type(None, ASCIIDOC) == NOT_FOUND
        assert get_type({"type": "string"}, ASCIIDOC) == NOT_FOUND
        assert get_type(ArrayType(), ASCIIDOC) == "NOT FOUND array"
