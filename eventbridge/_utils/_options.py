from collections.abc import Iterable, Mapping
from enum import Enum
from typing import Any, Optional, Union

from pydantic import BaseModel

Options = Union[Mapping[str, Any], Iterable[tuple[str, Any]], BaseModel]


def camelize(key: Any) -> str:
    """Turns an underscored option key into the service's field name.

    Each underscore-separated segment gets its first letter uppercased, the
    rest of the segment is left alone, and the segments are joined.

    >>> camelize("name_prefix")
    'NamePrefix'
    >>> camelize("role_arn")
    'RoleArn'
    """
    if isinstance(key, Enum):
        key = key.value
    return "".join(segment[:1].upper() + segment[1:] for segment in str(key).split("_"))


def normalize_options(options: Optional[Options]) -> dict[str, Any]:
    """Maps option keys to their wire names, leaving values untouched.

    Accepts a mapping, an iterable of ``(key, value)`` pairs, or a pydantic
    model whose aliases already carry the wire names. Later duplicate keys win.
    """
    if not options:
        return {}

    if isinstance(options, BaseModel):
        return options.model_dump(by_alias=True, exclude_none=True)

    pairs = options.items() if isinstance(options, Mapping) else options

    return {camelize(key): value for key, value in pairs}
