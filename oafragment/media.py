from typing import Optional, Dict, Any, Tuple

from pydantic import Field, StrictBool

from .base import ObjectExtended
from .example import Example
from .general import ReferenceOr
from .parameter import Header, QueryStyle
from .schemas import Schema


class Encoding(ObjectExtended):
    """
    A single encoding definition applied to a single schema property.

    headers is only used if the media type is multipart, style, explode and
    allowReserved are only used for application/x-www-form-urlencoded.  The
    media type is not checked.

    .. _Encoding: https://github.com/OAI/OpenAPI-Specification/blob/main/versions/3.0.3.md#encoding-object
    """

    contentType: Optional[str] = Field(default=None)
    headers: Dict[str, ReferenceOr[Header]] = Field(default_factory=dict)
    style: Optional[QueryStyle] = Field(default=None)
    explode: Optional[StrictBool] = Field(default=None)
    allowReserved: Optional[StrictBool] = Field(default=None)

    def codec(self) -> Tuple[QueryStyle, bool, bool]:
        """
        style, explode and allowReserved with the defaults applied

        Deviating from the specification, explode defaults to False for all
        styles - including form.
        """
        style = self.style or QueryStyle.default()
        explode = self.explode if self.explode is not None else False
        allowReserved = self.allowReserved if self.allowReserved is not None else False
        return style, explode, allowReserved


class MediaType(ObjectExtended):
    """
    A `MediaType`_ object provides schema and examples for the media type identified
    by its key.  These are used in a RequestBody object.

    example and examples are both kept if present.

    .. _MediaType: https://github.com/OAI/OpenAPI-Specification/blob/main/versions/3.0.3.md#media-type-object
    """

    schema_: Optional[ReferenceOr[Schema]] = Field(default=None, alias="schema")
    example: Optional[Any] = Field(default=None)  # 'any' type
    examples: Dict[str, ReferenceOr[Example]] = Field(default_factory=dict)
    encoding: Dict[str, Encoding] = Field(default_factory=dict)
