"""Shared fixtures for the rbtypegen tests."""

from pathlib import Path

import pytest

from rbtypegen import (
    EnumType, EnumValue, ListType, Model, Name, PrimitiveKind, PrimitiveType,
    RubyBuffer, RubyNames, StructMember, StructType,
)

SAMPLES_DIR = Path(__file__).parent.parent / "samples"

BOOLEAN = PrimitiveType(PrimitiveKind.BOOLEAN)
STRING = PrimitiveType(PrimitiveKind.STRING)
INTEGER = PrimitiveType(PrimitiveKind.INTEGER)
DECIMAL = PrimitiveType(PrimitiveKind.DECIMAL)
DATE = PrimitiveType(PrimitiveKind.DATE)


def member(name: str, type) -> StructMember:
    return StructMember(name=Name.parse(name), type=type)


def struct(name: str, base=None, attributes=(), links=()) -> StructType:
    return StructType(name=Name.parse(name), base=base, attributes=list(attributes), links=list(links))


def enum(name: str, *values: str) -> EnumType:
    return EnumType(name=Name.parse(name), values=[EnumValue(Name.parse(v)) for v in values])


@pytest.fixture
def names():
    return RubyNames(module_name="OvirtSDK4")


@pytest.fixture
def buffer():
    return RubyBuffer("ovirtsdk4/types")


@pytest.fixture
def color():
    return enum("Color", "RED", "GREEN")


@pytest.fixture
def base_and_derived():
    base = struct("Base", attributes=[member("id", STRING)])
    derived = struct("Derived", base=base, attributes=[member("x", INTEGER)])
    return base, derived


@pytest.fixture
def small_model(base_and_derived, color):
    base, derived = base_and_derived
    # Declared out of order on purpose:
    return Model(types=[color, derived, base])


@pytest.fixture
def vm_model(color):
    identified = struct("Identified", attributes=[member("name", STRING), member("id", STRING)])
    disk = struct("Disk", base=identified, attributes=[member("bootable", BOOLEAN)])
    cluster = struct("Cluster", base=identified)
    vm = struct(
        "Vm",
        base=identified,
        attributes=[member("memory", INTEGER), member("color", color)],
        links=[member("disks", ListType(disk)), member("cluster", cluster)],
    )
    return Model(types=[vm, disk, cluster, identified, color])


@pytest.fixture
def sample_model_file():
    return SAMPLES_DIR / "types.json"
