from typing import List, Dict, Tuple, Union, Any, Optional
import dataclasses

import pydantic


class ErrorBase(Exception):
    pass


class SpecError(ErrorBase, ValueError):
    """
    This error class is used when an invalid format is found while parsing an
    object in the description document.
    """

    def __init__(self, message, element=None):
        super().__init__(message)
        self.message = message
        self.element = element


TRANSPARENT = frozenset(["reference", "inline", "schema", "content", "format"])
"""
entries of a validation error location which may not be keys of the document - the variant tags of the tagged unions
and the flattened Header.format
"""


def _document_path(
    node: Any, loc: Tuple[Union[str, int], ...], missing: bool, lenient: bool = False
) -> Optional[Tuple[Union[str, int], ...]]:
    """
    map the location of a validation error to the keys of the document

    each entry of the location either is a key of the current node or a transparent entry which is skipped,
    the first mapping which consumes the whole location is used.  lenient stops at the first entry which is
    neither, e.g. the member name of a Union
    """
    if not loc:
        return ()

    k, rest = loc[0], loc[1:]
    if isinstance(node, dict) and k in node:
        r = _document_path(node[k], rest, missing, lenient)
        if r is not None:
            return (k,) + r
    elif isinstance(node, list) and isinstance(k, int) and 0 <= k < len(node):
        r = _document_path(node[k], rest, missing, lenient)
        if r is not None:
            return (k,) + r
    elif isinstance(node, dict) and missing and not rest and k not in TRANSPARENT:
        return (k,)

    if k in TRANSPARENT:
        return _document_path(node, rest, missing, lenient)
    return () if lenient else None


@dataclasses.dataclass(repr=False)
class DecodeError(SpecError):
    """
    A document node can not be decoded into the typed value
    """

    message: str
    element: str
    path: Tuple[Union[str, int], ...]
    errors: List[Dict[str, Any]]

    def __post_init__(self):
        super().__init__(self.message, self.element)

    def __str__(self):
        return f"<{self.__class__.__name__} {self.element} {self.location}: {self.message}>"

    def __repr__(self):
        return self.__str__()

    @property
    def location(self) -> str:
        return "/".join(map(str, self.path)) or "/"

    @classmethod
    def from_validation_error(cls, element: str, error: pydantic.ValidationError, document: Any) -> "DecodeError":
        errors = error.errors(include_url=False)
        first = errors[0]
        loc = tuple(first["loc"])
        path = _document_path(document, loc, first["type"] == "missing")
        if path is None:
            path = _document_path(document, loc, False, lenient=True)
        type_ = {
            "enum": InvalidEnumerationValueError,
            "schema_or_content": FormatError,
        }.get(first["type"], ShapeMismatchError)
        return type_(first["msg"], element, path, errors)


class ShapeMismatchError(DecodeError):
    """
    A named field is present, but its value is of the wrong kind
    """


class InvalidEnumerationValueError(DecodeError):
    """
    The value is not among the variants of the enumeration
    """


class FormatError(DecodeError):
    """
    A Header requires either schema or content
    """
