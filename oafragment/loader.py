import json
import logging
import re
from typing import Optional, Union

import yaml

from ._types import JSON
from . import log as _log

log = logging.getLogger("oafragment.loader")


class YAML12Loader(yaml.SafeLoader):
    """
    OpenAPI uses YAML 1.2, pyyaml is limited to 1.1

    remove all implicit tags from the SafeLoader and add the YAML 1.2 core
    schema tags, so e.g. ``on``/``off``/``yes``/``no`` and dates stay strings
    """

    _core_resolvers = [
        ["bool", re.compile(r"""^(?:true|True|TRUE|false|False|FALSE)$""", re.X), list("tTfF")],
        [
            "int",
            re.compile(
                r"""^(?:
                                  |0o[0-7]+
                                  |[-+]?(?:[0-9]+)
                                  |0x[0-9a-fA-F]+
                                  )$""",
                re.X,
            ),
            list("-+0123456789"),
        ],
        [
            "float",
            re.compile(
                r"""^(?:[-+]?(?:\.[0-9]+|[0-9]+(\.[0-9]*)?)(?:[eE][-+]?[0-9]+)?
                                  |[-+]?\.(?:inf|Inf|INF)
                                  |\.(?:nan|NaN|NAN))$""",
                re.X,
            ),
            list("-+0123456789."),
        ],
        ["null", re.compile(r"""^(?:~||null|Null|NULL)$""", re.X), ["~", "n", "N", ""]],
    ]
    """
    core tags from
    https://github.com/yaml/pyyaml/pull/700/files
    """

    @classmethod
    def remove_implicit_resolver(cls, tag_to_remove):
        """
        Remove implicit resolvers for a particular tag

        Takes care not to modify resolvers in super classes.
        """
        if "yaml_implicit_resolvers" not in cls.__dict__:
            cls.yaml_implicit_resolvers = cls.yaml_implicit_resolvers.copy()

        for first_letter, mappings in cls.yaml_implicit_resolvers.items():
            cls.yaml_implicit_resolvers[first_letter] = [
                (tag, regexp) for tag, regexp in mappings if tag != tag_to_remove
            ]


for _tag in set(tag for mappings in YAML12Loader.yaml_implicit_resolvers.values() for tag, _ in mappings):
    YAML12Loader.remove_implicit_resolver(_tag)
for _tag, _regex, _initial in YAML12Loader._core_resolvers:
    YAML12Loader.add_implicit_resolver(f"tag:yaml.org,2002:{_tag}", _regex, _initial)


def decode(data: bytes, codec: Optional[str] = None) -> str:
    """
    decode bytes to ascii or utf-8

    :param data:
    :param codec: the codec to use, if not set ascii & utf-8 are tried
    """
    codecs = [codec] if codec is not None else ["ascii", "utf-8"]
    for c in codecs:
        try:
            return data.decode(c)
        except UnicodeError:
            continue
    raise ValueError("encoding")


def loads(data: Union[str, bytes], format: Optional[str] = None, yload=YAML12Loader) -> JSON:
    """
    parse a document as json or yaml into a document tree

    :param data: the document
    :param format: "json" or "yaml" - if not set json is tried first
    :param yload: YAML loader to use
    """
    _log.init()
    if isinstance(data, bytes):
        data = decode(data)

    if format is None:
        try:
            return json.loads(data)
        except ValueError as e:
            log.debug(f"not json: {e}")
            format = "yaml"

    if format == "json":
        return json.loads(data)
    elif format == "yaml":
        return yaml.load(data, Loader=yload)
    else:
        raise ValueError(f"{format} is not yaml/json")
