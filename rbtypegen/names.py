"""Naming rules that turn model names into Ruby names"""

from dataclasses import dataclass
from typing import Optional

from .buffer import MODULE_SEPARATOR
from .types import EnumType, ListType, Name, PrimitiveKind, PrimitiveType, StructType, Type


@dataclass(frozen=True)
class RubyName:
    """Ruby class name together with the module that contains it"""
    class_name: str
    module_name: str = ''

    def __str__(self) -> str:
        if not self.module_name:
            return self.class_name
        return f'{self.module_name}{MODULE_SEPARATOR}{self.class_name}'


class RubyNames:
    """Calculates the Ruby names of the concepts of the model"""

    PRIMITIVE_CLASSES = {
        PrimitiveKind.BOOLEAN: 'Boolean',
        PrimitiveKind.STRING: 'String',
        PrimitiveKind.INTEGER: 'Integer',
        PrimitiveKind.DECIMAL: 'Float',
        PrimitiveKind.DATE: 'DateTime',
    }

    RESERVED_WORDS = frozenset({
        'alias', 'and', 'begin', 'break', 'case', 'class', 'def', 'defined?',
        'do', 'else', 'elsif', 'end', 'ensure', 'false', 'for', 'if', 'in',
        'module', 'next', 'nil', 'not', 'or', 'redo', 'rescue', 'retry',
        'return', 'self', 'super', 'then', 'true', 'undef', 'unless', 'until',
        'when', 'while', 'yield',
    })

    def __init__(self, module_name: str = 'Sdk', module_path: Optional[str] = None,
                 base_struct_name: str = 'Struct'):
        self.module_name = module_name
        self.module_path = module_path or module_name.lower().replace(MODULE_SEPARATOR, '/')
        self.base_struct_name = base_struct_name

    def get_type_name(self, type: Type) -> RubyName:
        """Ruby class name of a struct, enum or primitive type"""
        if isinstance(type, PrimitiveType):
            return RubyName(self.PRIMITIVE_CLASSES[type.kind])
        if isinstance(type, (StructType, EnumType)):
            return RubyName(self.get_class_style_name(type.name), self.module_name)
        if isinstance(type, ListType):
            raise TypeError("List types don't have a Ruby class name")
        raise TypeError(f"Don't know how to name type {type!r}")

    def get_base_struct_name(self) -> RubyName:
        """Class that structs without an explicit base extend"""
        return RubyName(self.base_struct_name, self.module_name)

    def get_class_style_name(self, name: Name) -> str:
        return ''.join(word.capitalize() for word in name.words)

    def get_member_style_name(self, name: Name) -> str:
        result = '_'.join(name.words)
        if result in self.RESERVED_WORDS:
            result += '_'
        return result

    def get_constant_style_name(self, name: Name) -> str:
        return '_'.join(name.words).upper()
