import enum
import typing
from typing import Annotated, Union, Optional, Dict, Any, Tuple

from pydantic import Discriminator, Field, StrictBool, Tag

from .base import ObjectBase, ObjectExtended
from .example import Example
from .general import ReferenceOr
from .schemas import Schema

if typing.TYPE_CHECKING:
    from .media import MediaType
    from ._types import SchemaType


class QueryStyle(str, enum.Enum):
    """
    https://github.com/OAI/OpenAPI-Specification/blob/main/versions/3.0.3.md#style-values
    """

    form = "form"
    spaceDelimited = "spaceDelimited"
    pipeDelimited = "pipeDelimited"
    deepObject = "deepObject"

    @classmethod
    def default(cls) -> "QueryStyle":
        return cls.form


class HeaderStyle(str, enum.Enum):
    simple = "simple"

    @classmethod
    def default(cls) -> "HeaderStyle":
        return cls.simple


class ParameterSchema(ObjectBase):
    schema_: ReferenceOr[Schema] = Field(alias="schema")


class ParameterContent(ObjectBase):
    content: Dict[str, "MediaType"] = Field(...)


SCHEMA_OR_CONTENT_KEYS = frozenset(["schema", "content"])


def _schema_or_content(value: Any) -> Optional[str]:
    if isinstance(value, ParameterSchema):
        return "schema"
    elif isinstance(value, ParameterContent):
        return "content"
    elif isinstance(value, dict):
        keys = SCHEMA_OR_CONTENT_KEYS & frozenset(value.keys())
        if len(keys) == 1:
            return next(iter(keys))
    return None


ParameterSchemaOrContent = Annotated[
    Union[Annotated[ParameterSchema, Tag("schema")], Annotated[ParameterContent, Tag("content")]],
    Discriminator(
        _schema_or_content,
        custom_error_type="schema_or_content",
        custom_error_message="exactly one of schema or content is required",
    ),
]
"""
The description of the value is either a schema or a map of media types with a single entry
"""


class Header(ObjectExtended):
    """
    The `Header Object`_ follows the structure of the Parameter Object, without name and in.

    The fields of :attr:`format` - either ``schema`` or ``content`` - are
    located at the same level as the named fields in the description document.

    .. _Header Object: https://github.com/OAI/OpenAPI-Specification/blob/main/versions/3.0.3.md#header-object
    """

    description: Optional[str] = Field(default=None)
    style: HeaderStyle = Field(default=HeaderStyle.simple)
    required: Optional[StrictBool] = Field(default=None)
    deprecated: Optional[StrictBool] = Field(default=None)
    format: ParameterSchemaOrContent = Field(...)
    example: Optional[Any] = Field(default=None)
    examples: Dict[str, ReferenceOr[Example]] = Field(default_factory=dict)

    @classmethod
    def _document_keys(cls):
        return (super()._document_keys() - {"format"}) | SCHEMA_OR_CONTENT_KEYS

    @classmethod
    def _unflatten(cls, values: Dict[str, Any]) -> Dict[str, Any]:
        if "format" not in values:
            values["format"] = {k: values.pop(k) for k in sorted(SCHEMA_OR_CONTENT_KEYS) if k in values}
        return values

    @classmethod
    def _flatten(cls, data: Dict[str, Any]) -> Dict[str, Any]:
        data.update(data.pop("format", dict()))
        return data

    def codec(self) -> Tuple[Optional["SchemaType"], HeaderStyle, bool]:
        """
        The schema, style and explode used to serialize the header value

        For content, the schema of the first media type is used.
        """
        if isinstance(self.format, ParameterSchema):
            schema = self.format.schema_
        else:
            schema = next(iter(self.format.content.values()), None)
            if schema is not None:
                schema = schema.schema_
        return schema, self.style, False
