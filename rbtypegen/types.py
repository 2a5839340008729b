"""Data types for the model the generator consumes"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union


_WORD_PATTERN = re.compile(r'[A-Z]+(?=[A-Z][a-z])|[A-Z]?[a-z0-9]+|[A-Z0-9]+')


@dataclass(frozen=True, order=True)
class Name:
    """Case neutral name, stored as a sequence of lower case words"""
    words: tuple[str, ...]

    @classmethod
    def parse(cls, text: str) -> 'Name':
        """Split camel case, snake case, dashed or spaced text into words"""
        words = []
        for part in re.split(r'[\s_\-]+', text):
            words.extend(w.lower() for w in _WORD_PATTERN.findall(part))
        if not words:
            raise ValueError(f"Can't build a name from {text!r}")
        return cls(tuple(words))

    def __str__(self) -> str:
        return '_'.join(self.words)


class PrimitiveKind(Enum):
    BOOLEAN = 'boolean'
    STRING = 'string'
    INTEGER = 'integer'
    DECIMAL = 'decimal'
    DATE = 'date'


@dataclass(frozen=True)
class PrimitiveType:
    """Built-in scalar type"""
    kind: PrimitiveKind

    @property
    def name(self) -> Name:
        return Name((self.kind.value,))


@dataclass(frozen=True)
class EnumValue:
    """Enum value"""
    name: Name


@dataclass(eq=False)
class EnumType:
    """Enum definition"""
    name: Name
    values: list[EnumValue] = field(default_factory=list)


@dataclass(frozen=True)
class StructMember:
    """Attribute or link of a struct"""
    name: Name
    type: 'Type'


@dataclass(eq=False)
class StructType:
    """Struct definition, optionally extending a base struct"""
    name: Name
    base: Optional['StructType'] = None
    attributes: list[StructMember] = field(default_factory=list)
    links: list[StructMember] = field(default_factory=list)


@dataclass(frozen=True)
class ListType:
    """Ordered collection of elements of one type"""
    element_type: 'Type'


Type = Union[PrimitiveType, EnumType, StructType, ListType]


@dataclass
class Model:
    """All the types declared for one generation run"""
    types: list[Type] = field(default_factory=list)

    def structs(self) -> list[StructType]:
        return [t for t in self.types if isinstance(t, StructType)]

    def enums(self) -> list[EnumType]:
        return [t for t in self.types if isinstance(t, EnumType)]
