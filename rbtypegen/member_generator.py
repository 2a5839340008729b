"""Member Generator - generates the Ruby accessors of struct attributes and links"""

from .buffer import RubyBuffer
from .names import RubyNames
from .types import EnumType, ListType, PrimitiveKind, PrimitiveType, StructMember, StructType, Type


class MemberGenerator:
    """Generates the getter and setter of each struct member"""

    # How primitive types are described in the documentation comments:
    PRIMITIVE_DOC_NAMES = {
        PrimitiveKind.BOOLEAN: 'boolean',
        PrimitiveKind.STRING: 'string',
        PrimitiveKind.INTEGER: 'Integer',
        PrimitiveKind.DECIMAL: 'float',
        PrimitiveKind.DATE: 'DateTime',
    }

    def __init__(self, buffer: RubyBuffer, names: RubyNames):
        self.buffer = buffer
        self.names = names

    def generate(self, member: StructMember):
        self.generate_getter(member)
        self.generate_setter(member)

    def generate_getter(self, member: StructMember):
        prop = self.names.get_member_style_name(member.name)
        type = member.type
        if isinstance(type, PrimitiveType):
            self._doc(f"Returns the {self.PRIMITIVE_DOC_NAMES[type.kind]} value.")
        elif isinstance(type, (EnumType, StructType)):
            self._doc(f"Returns the {self.names.get_type_name(type)} value.")
        elif isinstance(type, ListType):
            element_name = self.names.get_type_name(type.element_type)
            self._doc(f"Returns an array of objects of type {element_name}.")
        else:
            self._unsupported(member, type)

        with self.buffer.block("def %s", prop):
            self.buffer.write("return @%s", prop)
        self.buffer.write()

    def generate_setter(self, member: StructMember):
        type = member.type
        if isinstance(type, PrimitiveType):
            self._primitive_setter(member, type)
        elif isinstance(type, EnumType):
            self._enum_setter(member, type)
        elif isinstance(type, StructType):
            self._struct_setter(member, type)
        elif isinstance(type, ListType):
            self._list_setter(member, type)
        else:
            self._unsupported(member, type)
        self.buffer.write()

    def _primitive_setter(self, member: StructMember, type: PrimitiveType):
        prop = self.names.get_member_style_name(member.name)
        self._doc(f"Sets the {self.PRIMITIVE_DOC_NAMES[type.kind]} value.")
        with self.buffer.block("def %s=(value)", prop):
            self.buffer.write("@%s = value", prop)

    def _enum_setter(self, member: StructMember, type: EnumType):
        prop = self.names.get_member_style_name(member.name)
        self._doc(f"Sets the {self.names.get_type_name(type)} value.")
        self.buffer.write("attr_writer :%s", prop)

    def _struct_setter(self, member: StructMember, type: StructType):
        prop = self.names.get_member_style_name(member.name)
        type_name = self.names.get_type_name(type)
        self._doc(
            f"Sets the {type_name} value.",
            "",
            f"The `object` can be an instance of {type_name} or a hash.",
            "If it is a hash then a new instance will be created passing the hash as the",
            "`opts` parameter to the constructor.",
        )
        with self.buffer.block("def %s=(object)", prop):
            with self.buffer.block("if object.is_a?(Hash)"):
                self.buffer.write("object = %s.new(object)", type_name.class_name)
            self.buffer.write("@%s = object", prop)

    def _list_setter(self, member: StructMember, type: ListType):
        prop = self.names.get_member_style_name(member.name)
        element_type = type.element_type
        if isinstance(element_type, PrimitiveType):
            self._doc(f"Sets the {self.PRIMITIVE_DOC_NAMES[element_type.kind]} values.")
        elif isinstance(element_type, EnumType):
            self._doc(f"Sets the {self.names.get_type_name(element_type)} values.")
        elif isinstance(element_type, StructType):
            self._struct_list_setter(prop, element_type)
            return
        else:
            self._unsupported(member, type)

        with self.buffer.block("def %s=(list)", prop):
            self.buffer.write("@%s = list", prop)

    def _struct_list_setter(self, prop: str, element_type: StructType):
        element_name = self.names.get_type_name(element_type)
        self._doc(f"Sets the values from a list or array of objects of type {element_name}.")
        with self.buffer.block("def %s=(list)", prop):
            with self.buffer.block("if list.class == Array"):
                self.buffer.write("list = List.new(list)")
                with self.buffer.block("list.each_with_index do |value, index|"):
                    with self.buffer.block("if value.is_a?(Hash)"):
                        self.buffer.write("list[index] = %s.new(value)", element_name.class_name)
            self.buffer.write("@%s = list", prop)

    def _doc(self, *lines: str):
        self.buffer.write("##")
        for line in lines:
            self.buffer.write(f"# {line}" if line else "#")
        self.buffer.write("#")

    def _unsupported(self, member: StructMember, type: Type):
        raise TypeError(f"Member '{member.name}' has unsupported type {type!r}")
