"""
Ruby SDK Types Generator Package

Turns a model of structs, enums, primitives and lists into the Ruby source
that declares the corresponding SDK classes:
  1. Forward declarations, ordered so that bases come first
  2. Classes with getters, setters and an options constructor
  3. Enum modules with one constant per value
"""

from .types import (
    Name, PrimitiveKind, PrimitiveType, EnumValue, EnumType, StructMember, StructType, ListType,
    Model,
)
from .errors import RbTypeGenError, ModelError, GenerationError
from .names import RubyName, RubyNames
from .buffer import RubyBuffer
from .type_sorter import sort_structs
from .member_generator import MemberGenerator
from .types_generator import TypesGenerator
from .loader import ModelLoader

__all__ = [
    'Name', 'PrimitiveKind', 'PrimitiveType', 'EnumValue', 'EnumType', 'StructMember',
    'StructType', 'ListType', 'Model',
    'RbTypeGenError', 'ModelError', 'GenerationError',
    'RubyName', 'RubyNames', 'RubyBuffer', 'sort_structs',
    'MemberGenerator', 'TypesGenerator', 'ModelLoader',
]
