"""OpenAPI / Swagger document parser.

Parses Swagger 2.0 and OpenAPI 3.x documents into an ApiDocument.
"""

import logging
from pathlib import Path
from urllib.parse import urlparse

from .base import (
    ApiDocument,
    ArrayType,
    Contact,
    Definition,
    Info,
    License,
    Operation,
    Parameter,
    PathItem,
    PrimitiveType,
    Property,
    RefType,
    Response,
    Tag,
    TypeRef,
)
from .detect import SwaggerParseError, detect_version, load_document

logger = logging.getLogger(__name__)

HTTP_METHODS = ("get", "put", "post", "delete", "options", "head", "patch")


def parse_swagger(file_path: Path) -> ApiDocument:
    """Parse a Swagger/OpenAPI file into an ApiDocument."""
    doc = load_document(file_path)
    return build_document(doc)


def build_document(doc: dict) -> ApiDocument:
    """Build an ApiDocument from an already loaded Swagger/OpenAPI dict."""
    version = detect_version(doc)
    logger.debug("Parsing %s document", version)
    is_v3 = version == "openapi3"

    paths: dict[str, PathItem | None] = {}
    for path, item in (doc.get("paths") or {}).items():
        if item is None:
            paths[path] = None
            continue
        paths[path] = _parse_path_item(doc, path, item, is_v3)

    if is_v3:
        schemas = (doc.get("components") or {}).get("schemas") or {}
        host, base_path, schemes = _parse_servers(doc.get("servers") or [])
    else:
        schemas = doc.get("definitions") or {}
        host = doc.get("host") or ""
        base_path = doc.get("basePath") or ""
        schemes = list(doc.get("schemes") or [])

    return ApiDocument(
        info=_parse_info(doc.get("info") or {}),
        host=host,
        base_path=base_path,
        schemes=schemes,
        consumes=list(doc.get("consumes") or []),
        produces=list(doc.get("produces") or []),
        tags=[
            Tag(name=t["name"], description=t.get("description") or "")
            for t in doc.get("tags") or []
            if t.get("name")
        ],
        paths=paths,
        definitions={
            name: _parse_definition(name, schema or {})
            for name, schema in schemas.items()
        },
    )


def resolve_ref(doc: dict, ref: str) -> dict:
    """Resolve a local JSON pointer such as '#/parameters/limit'."""
    if not ref.startswith("#/"):
        raise SwaggerParseError(f"only local references are supported: {ref}")
    node = doc
    for part in ref[2:].split("/"):
        part = part.replace("~1", "/").replace("~0", "~")
        if not isinstance(node, dict) or part not in node:
            raise SwaggerParseError(f"unresolvable reference: {ref}")
        node = node[part]
    return node


def type_ref(schema: dict | None) -> TypeRef | None:
    """Convert a schema (or a Swagger 2.0 non-body parameter) into a TypeRef."""
    if not isinstance(schema, dict):
        return None
    if "$ref" in schema:
        return RefType(name=schema["$ref"].rsplit("/", 1)[-1])
    schema_type = schema.get("type")
    if schema_type == "array":
        return ArrayType(items=type_ref(schema.get("items")))
    if schema_type:
        return PrimitiveType(
            name=schema_type,
            format=schema.get("format"),
            enum=[str(v) for v in schema.get("enum") or []],
        )
    if "properties" in schema:
        return PrimitiveType(name="object")
    return None


def _parse_info(info: dict) -> Info:
    contact = info.get("contact")
    license_ = info.get("license")
    return Info(
        title=info.get("title") or "",
        description=info.get("description") or "",
        version=str(info.get("version") or ""),
        terms_of_service=info.get("termsOfService") or "",
        contact=Contact(
            name=contact.get("name") or "",
            url=contact.get("url") or "",
            email=contact.get("email") or "",
        ) if contact else None,
        license=License(
            name=license_.get("name") or "",
            url=license_.get("url") or "",
        ) if license_ else None,
    )


def _parse_servers(servers: list[dict]) -> tuple[str, str, list[str]]:
    if not servers:
        return "", "", []
    url = urlparse(servers[0].get("url") or "")
    schemes = [url.scheme] if url.scheme else []
    return url.netloc, url.path, schemes


def _parse_path_item(doc: dict, path: str, item: dict, is_v3: bool) -> PathItem:
    shared = item.get("parameters") or []
    operations: dict[str, Operation | None] = {}
    for method, operation in item.items():
        if method not in HTTP_METHODS:
            continue
        if operation is None:
            operations[method] = None
            continue
        operations[method] = _parse_operation(doc, method, path, operation, shared, is_v3)
    return PathItem(operations=operations)


def _parse_operation(
    doc: dict, method: str, path: str, operation: dict, shared: list[dict], is_v3: bool
) -> Operation:
    params = _merge_parameters(doc, shared, operation.get("parameters") or [])
    parameters = [_parse_parameter(p, is_v3) for p in params]

    if is_v3:
        body = operation.get("requestBody")
        if body and "$ref" in body:
            body = resolve_ref(doc, body["$ref"])
        if body:
            parameters.append(_parse_request_body(body))
        consumes = list(((body or {}).get("content") or {}).keys())
    else:
        consumes = list(operation.get("consumes") or [])

    responses = {}
    produces = [] if is_v3 else list(operation.get("produces") or [])
    for code, resp in (operation.get("responses") or {}).items():
        if resp is None:
            continue
        if "$ref" in resp:
            resp = resolve_ref(doc, resp["$ref"])
        if is_v3:
            content = resp.get("content") or {}
            for content_type in content:
                if content_type not in produces:
                    produces.append(content_type)
            schema = _preferred_schema(content)
        else:
            schema = resp.get("schema")
        responses[str(code)] = Response(
            code=str(code),
            description=resp.get("description") or "",
            schema_type=type_ref(schema),
        )

    return Operation(
        method=method.upper(),
        path=path,
        summary=operation.get("summary") or "",
        description=operation.get("description") or "",
        parameters=parameters,
        responses=responses,
        consumes=consumes,
        produces=produces,
        tags=list(operation.get("tags") or []),
    )


def _merge_parameters(doc: dict, shared: list[dict], own: list[dict]) -> list[dict]:
    merged: dict[tuple[str, str], dict] = {}
    for p in [*shared, *own]:
        if "$ref" in p:
            p = resolve_ref(doc, p["$ref"])
        merged[(p.get("name", ""), p.get("in", "query"))] = p
    return list(merged.values())


def _parse_parameter(p: dict, is_v3: bool) -> Parameter:
    location = p.get("in", "query")
    if location == "body" or is_v3:
        schema = p.get("schema") or {}
    else:
        schema = p
    default = p.get("default", schema.get("default"))
    return Parameter(
        name=p.get("name", ""),
        location=location,
        required=bool(p.get("required", False)),
        description=p.get("description") or "",
        type=type_ref(schema),
        default=default,
    )


def _parse_request_body(body: dict) -> Parameter:
    return Parameter(
        name="body",
        location="body",
        required=bool(body.get("required", False)),
        description=body.get("description") or "",
        type=type_ref(_preferred_schema(body.get("content") or {})),
    )


def _preferred_schema(content: dict) -> dict | None:
    for content_type in ("application/json", "multipart/form-data"):
        if content_type in content:
            return content[content_type].get("schema")
    # Fallback: first available schema
    for ct_data in content.values():
        return (ct_data or {}).get("schema")
    return None


def _parse_definition(name: str, schema: dict) -> Definition:
    required = set(schema.get("required") or [])
    properties = {
        prop_name: Property(
            type=type_ref(prop),
            description=(prop or {}).get("description") or "",
            required=prop_name in required,
            default=(prop or {}).get("default"),
        )
        for prop_name, prop in (schema.get("properties") or {}).items()
    }
    return Definition(
        name=name,
        description=schema.get("description") or "",
        type=type_ref(schema),
        properties=properties,
    )
