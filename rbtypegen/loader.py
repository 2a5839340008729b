"""Loader for JSON model descriptions"""

import json
from typing import Any

from .errors import ModelError
from .types import (
    EnumType, EnumValue, ListType, Model, Name, PrimitiveKind, PrimitiveType,
    StructMember, StructType, Type,
)

LIST_SUFFIX = '[]'
PRIMITIVES = {kind.value: PrimitiveType(kind) for kind in PrimitiveKind}


class ModelLoader:
    """Builds a Model from a JSON document listing its types"""

    def __init__(self, content: str):
        self.content = content
        self._declared: dict[Name, Type] = {}

    def load(self) -> Model:
        try:
            document = json.loads(self.content)
        except json.JSONDecodeError as exception:
            raise ModelError(f"Model description isn't valid JSON: {exception}") from exception
        if not isinstance(document, dict) or not isinstance(document.get('types'), list):
            raise ModelError("Model description must be an object with a 'types' list")

        entries = document['types']
        # First declare all the types, so that references can point forward:
        for entry in entries:
            self._declare(entry)
        for entry in entries:
            self._populate(entry)
        return Model(types=list(self._declared.values()))

    def _declare(self, entry: Any):
        if not isinstance(entry, dict) or not entry.get('name'):
            raise ModelError(f"Type declaration without a name: {entry!r}")
        name = self._name(entry['name'])
        if name in self._declared:
            raise ModelError(f"Type '{entry['name']}' is declared more than once")

        kind = entry.get('kind')
        if kind == 'struct':
            self._declared[name] = StructType(name=name)
        elif kind == 'enum':
            values = [EnumValue(self._name(v)) for v in self._list(entry, 'values')]
            self._declared[name] = EnumType(name=name, values=values)
        else:
            raise ModelError(f"Type '{entry['name']}' has unknown kind {kind!r}")

    def _populate(self, entry: dict):
        declared = self._declared[Name.parse(entry['name'])]
        if not isinstance(declared, StructType):
            return

        if base := entry.get('base'):
            base_type = self._resolve(base, entry['name'])
            if not isinstance(base_type, StructType):
                raise ModelError(f"Base '{base}' of struct '{entry['name']}' isn't a struct")
            declared.base = base_type
        declared.attributes = self._members(self._list(entry, 'attributes'), entry['name'])
        declared.links = self._members(self._list(entry, 'links'), entry['name'])

    def _members(self, entries: list, owner: str) -> list[StructMember]:
        members = []
        for m in entries:
            if not isinstance(m, dict) or not m.get('name') or not m.get('type'):
                raise ModelError(f"Member of '{owner}' needs a name and a type: {m!r}")
            members.append(StructMember(name=self._name(m['name']), type=self._resolve(m['type'], owner)))
        return members

    def _list(self, entry: dict, key: str) -> list:
        items = entry.get(key, [])
        if not isinstance(items, list):
            raise ModelError(f"'{key}' of type '{entry['name']}' must be a list, got {items!r}")
        return items

    def _name(self, text: str) -> Name:
        if not isinstance(text, str):
            raise ModelError(f"Name must be a string, got {text!r}")
        try:
            return Name.parse(text)
        except ValueError as exception:
            raise ModelError(str(exception)) from exception

    def _resolve(self, reference: str, owner: str) -> Type:
        """Resolve a reference like ``string``, ``Disk`` or ``Disk[]``"""
        if not isinstance(reference, str):
            raise ModelError(f"Type reference from '{owner}' must be a string, got {reference!r}")
        reference = reference.strip()
        if reference.endswith(LIST_SUFFIX):
            return ListType(self._resolve(reference[:-len(LIST_SUFFIX)], owner))
        if reference in PRIMITIVES:
            return PRIMITIVES[reference]
        try:
            return self._declared[Name.parse(reference)]
        except (KeyError, ValueError):
            raise ModelError(f"Type '{reference}' referenced from '{owner}' isn't declared") from None
