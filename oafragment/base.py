from typing import Any, Dict, FrozenSet
import logging

from pydantic import BaseModel, Field, ValidationError, ValidationInfo, model_validator, model_serializer
from pydantic import SerializerFunctionWrapHandler, SerializationInfo

from .errors import DecodeError
from . import log as _log

log = logging.getLogger("oafragment.base")

EXTENSION_PREFIX = "x-"
"""
https://github.com/OAI/OpenAPI-Specification/blob/main/versions/3.0.3.md#specification-extensions
"""

DOCUMENT = "document"


class ObjectBase(BaseModel):
    """
    The base class for all document objects.  Provides the decode/encode entry
    points between a document tree and typed values.
    """

    model_config = dict(arbitrary_types_allowed=False, extra="forbid", populate_by_name=True)

    @classmethod
    def decode(cls, document: Any):
        """
        Creates a typed value from a document node.

        :param document: the document node, e.g. the result of :func:`json.loads`
        :raises DecodeError: if a named field has the wrong shape or value
        """
        _log.init()
        try:
            return cls.model_validate(document, context={DOCUMENT: True})
        except ValidationError as e:
            error = DecodeError.from_validation_error(cls.__name__, e, document)
            log.debug(f"decode {cls.__name__} failed at {error.path}: {error.message}")
            raise error from e

    def encode(self) -> Dict[str, Any]:
        """
        Creates a minimal document node from this value.
        """
        return self.model_dump(mode="json", by_alias=True)

    @classmethod
    def _document_keys(cls) -> FrozenSet[str]:
        return frozenset(field.alias or name for name, field in cls.model_fields.items())


class ObjectExtended(ObjectBase):
    """
    Objects which may carry additional keys.

    Every key of a document node which is not a named field is captured into
    :attr:`extensions` when decoding and emitted at the same level when
    encoding.
    """

    extensions: Dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def _unflatten(cls, values: Dict[str, Any]) -> Dict[str, Any]:
        """
        consume the keys of flattened members from values and nest them below their field
        """
        return values

    @classmethod
    def _flatten(cls, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        inverse of :meth:`_unflatten`
        """
        return data

    @model_validator(mode="before")
    @classmethod
    def validate_ObjectExtended_extensions(cls, values, info: ValidationInfo):
        if not isinstance(values, dict):
            return values

        document = bool(info.context and info.context.get(DOCUMENT))
        known = cls._document_keys() - {"extensions"}
        if not document:
            known = known | frozenset(cls.model_fields.keys())

        values = dict(values)
        e = dict()
        for k in list(values.keys()):
            if k not in known:
                e[k] = values.pop(k)

        if e:
            log.debug(f"{cls.__name__} extensions {sorted(e.keys())}")
            values["extensions"] = {**values.get("extensions", dict()), **e}

        return cls._unflatten(values)

    @model_serializer(mode="wrap")
    def serialize_ObjectExtended(self, handler: SerializerFunctionWrapHandler, info: SerializationInfo):
        data = handler(self)
        if not isinstance(data, dict):
            return data

        extensions = data.pop("extensions", dict())
        for name, field in type(self).model_fields.items():
            key = field.alias if (info.by_alias and field.alias) else name
            value = getattr(self, name)
            if value is None or (field.default_factory is not None and not value):
                data.pop(key, None)

        data = self._flatten(data)
        data.update(extensions)
        return data

    def vendor_extensions(self) -> Dict[str, Any]:
        """
        The extensions using the specification extension prefix
        """
        return {k: v for k, v in self.extensions.items() if k.startswith(EXTENSION_PREFIX)}


class ReferenceBase:
    pass

