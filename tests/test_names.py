"""Tests for names and Ruby naming rules."""

import pytest

from conftest import DATE, DECIMAL, INTEGER, enum, struct

from rbtypegen import ListType, Name, RubyName, RubyNames


@pytest.mark.parametrize("text, words", [
    ("VmStatus", ("vm", "status")),
    ("vm_status", ("vm", "status")),
    ("vm-status", ("vm", "status")),
    ("HTTPServer", ("http", "server")),
    ("OvirtSDK4", ("ovirt", "sdk4")),
    ("RED", ("red",)),
    ("ipv6 address", ("ipv6", "address")),
])
def test_parse_name(text, words):
    assert Name.parse(text).words == words


def test_parse_rejects_empty_names():
    with pytest.raises(ValueError):
        Name.parse("__")


def test_names_sort_by_words():
    names = [Name.parse(n) for n in ["VmPool", "Vm", "Disk"]]

    assert [str(n) for n in sorted(names)] == ["disk", "vm", "vm_pool"]


def test_type_names(names):
    assert names.get_type_name(struct("VmPool")) == RubyName("VmPool", "OvirtSDK4")
    assert str(names.get_type_name(enum("vm_status"))) == "OvirtSDK4::VmStatus"
    assert str(names.get_type_name(INTEGER)) == "Integer"
    assert str(names.get_type_name(DECIMAL)) == "Float"
    assert str(names.get_type_name(DATE)) == "DateTime"


def test_list_types_have_no_class_name(names):
    with pytest.raises(TypeError):
        names.get_type_name(ListType(INTEGER))


def test_member_and_constant_styles(names):
    assert names.get_member_style_name(Name.parse("PoweringUp")) == "powering_up"
    assert names.get_member_style_name(Name.parse("end")) == "end_"
    assert names.get_constant_style_name(Name.parse("powering_up")) == "POWERING_UP"


def test_base_struct_name(names):
    assert names.get_base_struct_name() == RubyName("Struct", "OvirtSDK4")


def test_module_path():
    assert RubyNames("OvirtSDK4").module_path == "ovirtsdk4"
    assert RubyNames("Acme::Sdk").module_path == "acme/sdk"
    assert RubyNames("Acme::Sdk", module_path="acme-sdk").module_path == "acme-sdk"
