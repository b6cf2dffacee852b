"""Unified data models for parsed API descriptions.

Both Swagger 2.0 and OpenAPI 3.x documents are converted into these
models; the document renderers only ever read them.
"""

from typing import Any, Literal, Union

from pydantic import BaseModel, ConfigDict


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class PrimitiveType(_Frozen):
    """A type declared inline by name (string, integer, object, ...)."""

    kind: Literal["primitive"] = "primitive"
    name: str
    format: str | None = None
    enum: list[str] = []


class RefType(_Frozen):
    """A reference to a named definition."""

    kind: Literal["ref"] = "ref"
    name: str


class ArrayType(_Frozen):
    """An array of some element type."""

    kind: Literal["array"] = "array"
    items: "TypeRef | None" = None
    qualifier: str = "array"


TypeRef = Union[PrimitiveType, RefType, ArrayType]

ArrayType.model_rebuild()


class Parameter(_Frozen):
    """A single operation parameter."""

    name: str
    location: str  # query / path / body / header / formData / cookie
    required: bool = False
    description: str = ""
    type: TypeRef | None = None
    default: Any = None


class Response(_Frozen):
    code: str  # "200", "404", "default", ...
    description: str = ""
    schema_type: TypeRef | None = None


class Operation(_Frozen):
    """One HTTP method handler on a path."""

    method: str  # GET / PUT / POST / DELETE / OPTIONS / HEAD / PATCH
    path: str
    summary: str = ""
    description: str = ""
    parameters: list[Parameter] = []
    responses: dict[str, Response] = {}
    consumes: list[str] = []
    produces: list[str] = []
    tags: list[str] = []

    @property
    def method_and_path(self) -> str:
        return f"{self.method} {self.path}"


class PathItem(_Frozen):
    operations: dict[str, Operation | None] = {}  # lower-case method -> operation


class Tag(_Frozen):
    name: str
    description: str = ""


class Property(_Frozen):
    type: TypeRef | None = None
    description: str = ""
    required: bool = False
    default: Any = None


class Definition(_Frozen):
    """A named schema from `definitions` or `components.schemas`."""

    name: str
    description: str = ""
    type: TypeRef | None = None
    properties: dict[str, Property] = {}


class Contact(_Frozen):
    name: str = ""
    url: str = ""
    email: str = ""


class License(_Frozen):
    name: str = ""
    url: str = ""


class Info(_Frozen):
    title: str = ""
    description: str = ""
    version: str = ""
    terms_of_service: str = ""
    contact: Contact | None = None
    license: License | None = None


class ApiDocument(_Frozen):
    """The whole parsed API description."""

    info: Info = Info()
    host: str = ""
    base_path: str = ""
    schemes: list[str] = []
    consumes: list[str] = []
    produces: list[str] = []
    tags: list[Tag] = []
    paths: dict[str, PathItem | None] = {}
    definitions: dict[str, Definition] = {}
