"""
Tests decoding and encoding the Header object

schema or content share the document level with the named fields of the Header
"""
import pytest

from oafragment import (
    Header,
    HeaderStyle,
    MediaType,
    ParameterContent,
    ParameterSchema,
    Reference,
    Schema,
)


def test_header_schema():
    h = Header.decode({"style": "simple", "schema": {"type": "string"}})

    assert h.style == HeaderStyle.simple
    assert isinstance(h.format, ParameterSchema)
    assert h.format.schema_ == Schema(type="string")
    assert h.required is None
    assert h.deprecated is None
    assert h.description is None
    assert h.example is None
    assert h.examples == {}
    assert h.extensions == {}


def test_header_style_default():
    """
    style is not optional
    """
    h = Header.decode({"schema": {"type": "integer"}})

    assert h.style is HeaderStyle.simple
    assert h.style == HeaderStyle.default()
    assert h.encode() == {"style": "simple", "schema": {"type": "integer"}}


def test_header_schema_reference():
    h = Header.decode({"schema": {"$ref": "#/components/schemas/RateLimit"}, "required": False})

    assert h.format.schema_ == Reference(ref="#/components/schemas/RateLimit")
    assert h.required is False
    assert h.codec() == (Reference(ref="#/components/schemas/RateLimit"), HeaderStyle.simple, False)


def test_header_content(with_header_content):
    h = Header.decode(with_header_content)

    assert h.description == "a header described by content"
    assert h.required is True
    assert h.deprecated is False
    assert isinstance(h.format, ParameterContent)

    m = h.format.content["application/json"]
    assert isinstance(m, MediaType)
    assert m.schema_.properties["a"].type == "integer"
    assert m.example == {"a": 1}

    assert h.examples["one"].value == '{"a": 1}'
    assert h.extensions == {"x-header-owner": "team"}

    schema, style, explode = h.codec()
    assert schema is m.schema_
    assert style == HeaderStyle.simple
    assert explode is False


def test_header_content_roundtrip(with_header_content):
    h = Header.decode(with_header_content)
    data = h.encode()

    assert data == dict(style="simple", **with_header_content)
    assert "format" not in data
    assert Header.decode(data) == h


def test_header_extensions_flattened():
    data = {
        "description": "rate limit",
        "schema": {"type": "integer", "x-schema-ext": 1},
        "x-rate": {"window": 60},
        "format": "vendor",
    }
    h = Header.decode(data)

    assert h.extensions == {"x-rate": {"window": 60}, "format": "vendor"}
    assert h.format.schema_.extensions == {"x-schema-ext": 1}
    assert h.encode() == dict(style="simple", **data)


def test_header_construct():
    h = Header(
        description="d",
        deprecated=True,
        format=ParameterSchema(schema=Schema(type="string", enum=["a", "b"])),
        example="a",
        extensions={"x-a": None},
    )

    data = h.encode()
    assert data == {
        "description": "d",
        "style": "simple",
        "deprecated": True,
        "schema": {"type": "string", "enum": ["a", "b"]},
        "example": "a",
        "x-a": None,
    }
    assert Header.decode(data) == h


def test_header_construct_flat():
    """
    schema/content may be passed flat as well
    """
    h = Header(schema={"type": "string"})
    assert h == Header(format=ParameterSchema(schema=Schema(type="string")))

    h = Header(content={"text/plain": {"schema": {"type": "string"}}})
    assert h.format == ParameterContent(content={"text/plain": MediaType(schema=Schema(type="string"))})


@pytest.mark.parametrize("required", [True, False, None])
def test_header_required_not_enforced(required):
    data = {"schema": {"type": "string"}}
    if required is not None:
        data["required"] = required
    h = Header.decode(data)

    assert h.required is required
    assert ("required" in h.encode()) is (required is not None)
