"""Ordering of struct types so that bases are declared before their extensions"""

from collections import deque
from typing import Iterable

from .types import StructType


def sort_structs(structs: Iterable[StructType]) -> list[StructType]:
    """Sort by name, then move every struct after its base.

    The base of every struct must be part of ``structs`` and the inheritance
    chains must not have cycles, otherwise this never returns.
    """
    pending = deque(sorted(structs, key=lambda s: s.name))
    ordered: list[StructType] = []
    accepted: set[StructType] = set()
    while pending:
        current = pending.popleft()
        if current.base is None or current.base in accepted:
            ordered.append(current)
            accepted.add(current)
        else:
            pending.append(current)
    return ordered
