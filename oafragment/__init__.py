from .errors import (
    ErrorBase,
    SpecError,
    DecodeError,
    ShapeMismatchError,
    InvalidEnumerationValueError,
    FormatError,
)
from .base import ObjectBase, ObjectExtended, EXTENSION_PREFIX
from .general import Reference, ReferenceOr
from .example import Example
from .schemas import Discriminator, Schema
from .parameter import (
    QueryStyle,
    HeaderStyle,
    ParameterSchema,
    ParameterContent,
    ParameterSchemaOrContent,
    Header,
)
from .media import Encoding, MediaType
from .loader import YAML12Loader, loads
from . import log


def __init():
    r = dict()
    CLASSES = [
        Reference,
        Example,
        Discriminator,
        Schema,
        ParameterSchema,
        ParameterContent,
        Header,
        Encoding,
        MediaType,
    ]
    for i in CLASSES:
        r[i.__name__] = i
    for i in CLASSES:
        i.model_rebuild(_types_namespace=r)


__init()

__all__ = [
    "ErrorBase",
    "SpecError",
    "DecodeError",
    "ShapeMismatchError",
    "InvalidEnumerationValueError",
    "FormatError",
    "ObjectBase",
    "ObjectExtended",
    "EXTENSION_PREFIX",
    "Reference",
    "ReferenceOr",
    "Example",
    "Discriminator",
    "Schema",
    "QueryStyle",
    "HeaderStyle",
    "ParameterSchema",
    "ParameterContent",
    "ParameterSchemaOrContent",
    "Header",
    "Encoding",
    "MediaType",
    "YAML12Loader",
    "loads",
    "log",
]
