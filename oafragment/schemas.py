from typing import Union, List, Any, Optional, Dict

from pydantic import Field, StrictBool, StrictFloat, StrictInt

from .base import ObjectExtended
from .general import ReferenceOr


class Discriminator(ObjectExtended):
    """

    .. here: https://github.com/OAI/OpenAPI-Specification/blob/main/versions/3.0.3.md#discriminator-object
    """

    propertyName: str = Field(...)
    mapping: Dict[str, str] = Field(default_factory=dict)


class Schema(ObjectExtended):
    """
    The `Schema Object`_ allows the definition of input and output data types.

    The schema is kept as found in the description document, it is not used
    to validate data.

    .. _Schema Object: https://github.com/OAI/OpenAPI-Specification/blob/main/versions/3.0.3.md#schema-object
    """

    title: Optional[str] = Field(default=None)
    multipleOf: Optional[Union[StrictInt, StrictFloat]] = Field(default=None)
    maximum: Optional[Union[StrictInt, StrictFloat]] = Field(default=None)
    exclusiveMaximum: Optional[StrictBool] = Field(default=None)
    minimum: Optional[Union[StrictInt, StrictFloat]] = Field(default=None)
    exclusiveMinimum: Optional[StrictBool] = Field(default=None)
    maxLength: Optional[StrictInt] = Field(default=None)
    minLength: Optional[StrictInt] = Field(default=None)
    pattern: Optional[str] = Field(default=None)
    maxItems: Optional[StrictInt] = Field(default=None)
    minItems: Optional[StrictInt] = Field(default=None)
    uniqueItems: Optional[StrictBool] = Field(default=None)
    maxProperties: Optional[StrictInt] = Field(default=None)
    minProperties: Optional[StrictInt] = Field(default=None)
    required: List[str] = Field(default_factory=list)
    enum: Optional[List[Any]] = Field(default=None)

    type: Optional[str] = Field(default=None)
    allOf: List[ReferenceOr["Schema"]] = Field(default_factory=list)
    oneOf: List[ReferenceOr["Schema"]] = Field(default_factory=list)
    anyOf: List[ReferenceOr["Schema"]] = Field(default_factory=list)
    not_: Optional[ReferenceOr["Schema"]] = Field(default=None, alias="not")
    items: Optional[ReferenceOr["Schema"]] = Field(default=None)
    properties: Dict[str, ReferenceOr["Schema"]] = Field(default_factory=dict)
    additionalProperties: Optional[Union[StrictBool, ReferenceOr["Schema"]]] = Field(default=None)
    description: Optional[str] = Field(default=None)
    format: Optional[str] = Field(default=None)
    default: Optional[Any] = Field(default=None)
    nullable: Optional[StrictBool] = Field(default=None)
    discriminator: Optional[Discriminator] = Field(default=None)
    readOnly: Optional[StrictBool] = Field(default=None)
    writeOnly: Optional[StrictBool] = Field(default=None)
    xml: Optional[Dict[str, Any]] = Field(default=None)
    externalDocs: Optional[Dict[str, Any]] = Field(default=None)
    example: Optional[Any] = Field(default=None)
    deprecated: Optional[StrictBool] = Field(default=None)
