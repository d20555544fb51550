from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Dict, List, Sequence, Union

from .inference import infer, prepare_root
from .models import ANY, NULL, ArrayOf, Entity, EntityRef, InferredType
from .naming import quote_key, sanitize_java_field

logger = logging.getLogger(__name__)


class UnsupportedLanguageError(ValueError):
    pass


class Language(str, Enum):
    TYPESCRIPT = 'typescript'
    KOTLIN = 'kotlin'
    JAVA = 'java'

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @property
    def default_root_name(self) -> str:
        return _DEFAULT_ROOT_NAMES[self]

    @classmethod
    def parse(cls, value: Union['Language', str]) -> 'Language':
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            choices = ", ".join(lang.value for lang in cls)
            raise UnsupportedLanguageError(
                f"Unsupported language {value!r}; expected one of: {choices}"
            ) from None


_DISPLAY_NAMES = {
    Language.TYPESCRIPT: 'TypeScript',
    Language.KOTLIN: 'Kotlin',
    Language.JAVA: 'Java',
}

_DEFAULT_ROOT_NAMES = {
    Language.TYPESCRIPT: 'RootStructure',
    Language.KOTLIN: 'RootData',
    Language.JAVA: 'RootEntity',
}


class EntityRenderer:
    """Renders entities in one target syntax.

    Subclasses provide the field type mapping and the declaration template;
    the walk over entities and the block joining are shared.
    """

    language: Language
    null_stub: str = '// Data is null'

    def field_type(self, t: InferredType) -> str:
        raise NotImplementedError

    def render_entity(self, entity: Entity) -> str:
        raise NotImplementedError

    def render_null(self, root_name: str) -> str:
        return self.null_stub

    def wrap(self, blocks: List[str], entities: Sequence[Entity]) -> str:
        return '\n\n'.join(blocks)

    def render(self, entities: Sequence[Entity]) -> str:
        blocks = [self.render_entity(entity) for entity in entities]
        return self.wrap(blocks, entities)


class TypeScriptRenderer(EntityRenderer):
    language = Language.TYPESCRIPT

    def field_type(self, t: InferredType) -> str:
        if isinstance(t, EntityRef):
            return t.name
        if isinstance(t, ArrayOf):
            return self._array_item_type(t.item) + '[]'
        if t.tag == NULL:
            return 'any /* null */'
        return t.tag

    def _array_item_type(self, t: InferredType) -> str:
        if isinstance(t, ArrayOf):
            return self._array_item_type(t.item) + '[]'
        if isinstance(t, EntityRef):
            return t.name
        if t.tag == NULL:
            return ANY
        return t.tag

    def render_entity(self, entity: Entity) -> str:
        lines = [f"export interface {entity.name} {{"]
        for key, t in entity.fields.items():
            name = quote_key(key, '"')
            lines.append(f"  {name}: {self.field_type(t)};")
        lines.append("}")
        return '\n'.join(lines)

    def render_null(self, root_name: str) -> str:
        return f"export type {root_name} = null | undefined;"


class _JvmRenderer(EntityRenderer):
    """Shared primitive table for the Kotlin and Java targets."""

    base_types: Dict[str, str] = {}
    fallback: str = ''

    def base_type(self, t: InferredType) -> str:
        if isinstance(t, EntityRef):
            return t.name
        if isinstance(t, ArrayOf):
            return f"List<{self.base_type(t.item)}>"
        return self.base_types.get(t.tag, self.fallback)


class KotlinRenderer(_JvmRenderer):
    language = Language.KOTLIN
    base_types = {'string': 'String', 'number': 'Double', 'boolean': 'Boolean'}
    fallback = 'Any'

    def field_type(self, t: InferredType) -> str:
        return self.base_type(t) + '?'

    def render_entity(self, entity: Entity) -> str:
        lines = [f"data class {entity.name}("]
        fields = list(entity.fields.items())
        for i, (key, t) in enumerate(fields):
            comma = ',' if i < len(fields) - 1 else ''
            name = quote_key(key, '`')
            lines.append(f"    val {name}: {self.field_type(t)} = null{comma}")
        lines.append(")")
        return '\n'.join(lines)


class JavaRenderer(_JvmRenderer):
    language = Language.JAVA
    base_types = {'string': 'String', 'number': 'Double', 'boolean': 'Boolean'}
    fallback = 'Object'

    def field_type(self, t: InferredType) -> str:
        return self.base_type(t)

    def render_entity(self, entity: Entity) -> str:
        lines = ["@Data", f"public class {entity.name} {{"]
        for key, t in entity.fields.items():
            lines.append(f"    private {self.field_type(t)} {sanitize_java_field(key)};")
        lines.append("}")
        return '\n'.join(lines)

    def wrap(self, blocks: List[str], entities: Sequence[Entity]) -> str:
        imports = "import lombok.Data;\n"
        if any(isinstance(t, ArrayOf) for entity in entities for t in entity.fields.values()):
            imports += "import java.util.List;\n"
        return imports + "\n" + '\n\n'.join(blocks)


_RENDERERS = {
    Language.TYPESCRIPT: TypeScriptRenderer(),
    Language.KOTLIN: KotlinRenderer(),
    Language.JAVA: JavaRenderer(),
}


def get_renderer(language: Union[Language, str]) -> EntityRenderer:
    return _RENDERERS[Language.parse(language)]


def render(entities: Sequence[Entity], language: Union[Language, str]) -> str:
    """Render entities as declarations, nested types ahead of their parents.

    `infer` already lists every entity after the ones it references, so the
    blocks are emitted in list order.
    """
    return get_renderer(language).render(entities)


def generate_code(value: Any, root_name: str = 'Root', language: Union[Language, str] = Language.TYPESCRIPT) -> str:
    """Infer types from a parsed JSON value and render them for `language`."""
    renderer = get_renderer(language)
    if value is None:
        return renderer.render_null(root_name)

    _, entities = infer(prepare_root(value), root_name)
    logger.debug("Rendering %d entities as %s", len(entities), renderer.language.value)
    return renderer.render(entities)
