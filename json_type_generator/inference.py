from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any, Dict, List, Set, Tuple

from .models import (
    ANY,
    BOOLEAN,
    NULL,
    NUMBER,
    STRING,
    ArrayOf,
    Entity,
    EntityRef,
    InferredType,
    Primitive,
    describe_type,
)
from .naming import capitalize

logger = logging.getLogger(__name__)

ROOT_WRAPPER_KEY = 'data'
ITEM_SUFFIX = 'Item'


class InferenceContext:
    """Per-call accumulator for used entity names and discovered entities."""

    def __init__(self) -> None:
        self.used_names: Set[str] = set()
        self.entities: List[Entity] = []

    def reserve_name(self, base: str) -> str:
        name = base
        counter = 1
        while name in self.used_names:
            name = f"{base}{counter}"
            counter += 1
        self.used_names.add(name)
        return name


def prepare_root(value: Any) -> Any:
    """Wrap a non-object root so inference always starts at an entity.

    `None` is returned untouched; callers short-circuit it.
    """
    if value is None or isinstance(value, dict):
        return value
    return {ROOT_WRAPPER_KEY: value}


def infer_type(value: Any, hint: str, ctx: InferenceContext) -> InferredType:
    if value is None:
        return Primitive(NULL)
    if isinstance(value, str):
        return Primitive(STRING)
    # bool before numbers: bool is an int subclass.
    if isinstance(value, bool):
        return Primitive(BOOLEAN)
    if isinstance(value, (int, float, Decimal)):
        return Primitive(NUMBER)

    if isinstance(value, list):
        if not value:
            return ArrayOf(Primitive(ANY))
        # Only the first element decides the item type.
        return ArrayOf(infer_type(value[0], hint + ITEM_SUFFIX, ctx))

    if isinstance(value, dict):
        name = ctx.reserve_name(capitalize(hint))
        fields: Dict[str, InferredType] = {}
        for key, child in value.items():
            fields[key] = infer_type(child, key, ctx)
        ctx.entities.append(Entity(name=name, fields=fields))
        return EntityRef(name)

    return Primitive(ANY)


def infer(value: Any, root_name: str) -> Tuple[InferredType, List[Entity]]:
    """Infer the type of `value` and every record type nested inside it.

    Entities come back with each nested entity ahead of the entity that
    references it, so the list can be rendered front to back.
    """
    ctx = InferenceContext()
    root_type = infer_type(value, root_name, ctx)
    logger.debug(
        "Inferred %d entities for root %r (%s)", len(ctx.entities), root_name, describe_type(root_type)
    )
    return root_type, ctx.entities
