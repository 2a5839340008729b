"""Types Generator - generates the Ruby classes that represent the types of the model"""

import logging
from pathlib import Path
from typing import Iterable, Union

from .buffer import RubyBuffer
from .errors import GenerationError
from .member_generator import MemberGenerator
from .names import RubyNames
from .type_sorter import sort_structs
from .types import EnumType, EnumValue, Model, StructType

logger = logging.getLogger(__name__)


class TypesGenerator:
    """Generates the ``types.rb`` file of the SDK"""

    def __init__(self, model: Model, names: RubyNames, requires: Iterable[str] = ()):
        self.model = model
        self.names = names
        self.requires = list(requires)

    @property
    def file_name(self) -> str:
        return f"{self.names.module_path}/types"

    def render(self) -> str:
        """Generate the source without writing it"""
        return self._build().render()

    def generate(self, out: Union[str, Path]) -> Path:
        """Generate the source and write it below ``out``"""
        buffer = self._build()
        try:
            return buffer.persist(out)
        except OSError as exception:
            raise GenerationError(f'Error writing types file "{self.file_name}"') from exception

    def _build(self) -> RubyBuffer:
        buffer = RubyBuffer(self.file_name)
        for name in self.requires:
            buffer.add_require(name)
        self.generate_source(buffer)
        return buffer

    def generate_source(self, buffer: RubyBuffer):
        # Bases have to be declared before their extensions, otherwise some
        # symbols won't be defined when the file is loaded.
        structs = sort_structs(self.model.structs())
        enums = sorted(self.model.enums(), key=lambda e: e.name)
        logger.debug("Generating %d struct types and %d enum types", len(structs), len(enums))
        members = MemberGenerator(buffer, self.names)

        with buffer.module(self.names.module_name):
            buffer.write()
            buffer.write("##")
            buffer.write("# These forward declarations are required in order to avoid circular dependencies.")
            buffer.write("#")
            for struct in structs:
                with self._class_declaration(buffer, struct):
                    pass
                buffer.write()

            for struct in structs:
                self._generate_struct(buffer, members, struct)

            for enum in enums:
                self._generate_enum(buffer, enum)
        buffer.write()

    def _generate_struct(self, buffer: RubyBuffer, members: MemberGenerator, struct: StructType):
        with self._class_declaration(buffer, struct):
            buffer.write()

            for member in sorted(struct.attributes, key=lambda m: m.name):
                members.generate(member)
            for member in sorted(struct.links, key=lambda m: m.name):
                members.generate(member)

            # Constructor with an option for each attribute and link:
            properties = sorted(
                self.names.get_member_style_name(m.name) for m in struct.attributes + struct.links
            )
            with buffer.block("def initialize(opts = {})"):
                buffer.write("super(opts)")
                for prop in properties:
                    buffer.write("self.%s = opts[:%s]", prop, prop)
            buffer.write()
        buffer.write()

    def _generate_enum(self, buffer: RubyBuffer, enum: EnumType):
        type_name = self.names.get_type_name(enum)
        with buffer.module(type_name.class_name):
            for value in sorted(enum.values, key=lambda v: v.name):
                self._generate_enum_value(buffer, value)
        buffer.write()

    def _generate_enum_value(self, buffer: RubyBuffer, value: EnumValue):
        constant = self.names.get_constant_style_name(value.name)
        literal = self.names.get_member_style_name(value.name)
        buffer.write("%s = '%s'", constant, literal)

    def _class_declaration(self, buffer: RubyBuffer, struct: StructType):
        type_name = self.names.get_type_name(struct)
        if struct.base is not None:
            base_name = self.names.get_type_name(struct.base)
        else:
            base_name = self.names.get_base_struct_name()
        return buffer.block("class %s < %s", type_name.class_name, base_name.class_name)
