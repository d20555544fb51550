from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Union

NULL = 'null'
STRING = 'string'
NUMBER = 'number'
BOOLEAN = 'boolean'
ANY = 'any'

PRIMITIVE_TAGS = (NULL, STRING, NUMBER, BOOLEAN, ANY)


@dataclass(frozen=True)
class Primitive:
    tag: str

    def __post_init__(self):
        if self.tag not in PRIMITIVE_TAGS:
            raise ValueError(f"Unknown primitive tag: {self.tag!r}")


@dataclass(frozen=True)
class ArrayOf:
    item: 'InferredType'


@dataclass(frozen=True)
class EntityRef:
    name: str


InferredType = Union[Primitive, ArrayOf, EntityRef]


@dataclass
class Entity:
    """A named record type inferred from one JSON object.

    `fields` keeps the source object's key order.
    """
    name: str
    fields: Dict[str, InferredType] = field(default_factory=dict)


def describe_type(t: InferredType) -> str:
    """Short debug spelling, e.g. `string`, `User`, `number[][]`."""
    if isinstance(t, ArrayOf):
        return describe_type(t.item) + '[]'
    if isinstance(t, EntityRef):
        return t.name
    return t.tag
