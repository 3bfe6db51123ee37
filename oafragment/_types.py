from typing import List, Optional, Union, TypeAlias

from .general import Reference
from .schemas import Schema


JSON: TypeAlias = Optional[Union[dict[str, "JSON"], list["JSON"], str, int, float, bool]]
"""
Define a JSON type
https://github.com/python/typing/issues/182#issuecomment-1320974824
"""

SchemaType = Union[Schema, Reference]

__all__: List[str] = [
    "JSON",
    "SchemaType",
]
