from typing import Annotated, Any, Union

from pydantic import Discriminator, Field, Tag

from .base import ObjectBase, ReferenceBase


class Reference(ObjectBase, ReferenceBase):
    """
    A `Reference Object`_ designates a reference to another node in the specification.

    .. _Reference Object: https://github.com/OAI/OpenAPI-Specification/blob/main/versions/3.0.3.md#reference-object
    """

    ref: str = Field(alias="$ref")

    model_config = dict(
        extra="ignore",  # """This object cannot be extended with additional properties and any properties added SHALL be ignored."""
    )


def _reference_or_inline(value: Any) -> str:
    if isinstance(value, dict):
        return "reference" if "$ref" in value else "inline"
    return "reference" if isinstance(value, ReferenceBase) else "inline"


class ReferenceOr:
    """
    ReferenceOr[T] - either a :class:`Reference` or an inline T

    The variant is chosen by the presence of the ``$ref`` key.
    """

    def __class_getitem__(cls, item):
        return Annotated[
            Union[Annotated[Reference, Tag("reference")], Annotated[item, Tag("inline")]],
            Discriminator(_reference_or_inline),
        ]
