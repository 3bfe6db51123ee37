from typing import Any, Optional

from pydantic import Field

from .base import ObjectExtended


class Example(ObjectExtended):
    """
    A `Example Object`_ holds an example value, either inline or by
    externalValue.

    .. _Example Object: https://github.com/OAI/OpenAPI-Specification/blob/main/versions/3.0.3.md#example-object
    """

    summary: Optional[str] = Field(default=None)
    description: Optional[str] = Field(default=None)
    value: Optional[Any] = Field(default=None)
    externalValue: Optional[str] = Field(default=None)
