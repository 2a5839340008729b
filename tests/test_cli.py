"""Tests for the command line interface."""

import pytest

from rbtypegen.cli import main, setup_parser


def test_parser_defaults():
    args = setup_parser().parse_args(["model.json"])

    assert args.model_file == "model.json"
    assert args.output_dir == "generated"
    assert args.module == "Sdk"
    assert args.module_path == ""
    assert args.base_class == "Struct"
    assert args.requires == []
    assert args.verbose is False


def test_parser_requires_model_file():
    with pytest.raises(SystemExit):
        setup_parser().parse_args([])


def test_generates_sample(sample_model_file, tmp_path, capsys):
    code = main([
        str(sample_model_file),
        "-o", str(tmp_path),
        "-m", "OvirtSDK4",
        "--require", "ovirtsdk4/type",
        "--require", "date",
    ])

    assert code == 0
    path = tmp_path / "ovirtsdk4" / "types.rb"
    content = path.read_text(encoding="utf-8")
    assert "require 'date'\nrequire 'ovirtsdk4/type'\n" in content
    assert "  class Vm < Identified\n" in content
    assert "    def disks=(list)\n" in content
    assert "  module VmStatus\n    DOWN = 'down'\n    POWERING_UP = 'powering_up'\n    UP = 'up'\n" in content
    assert f"Generated: {path}" in capsys.readouterr().out


def test_module_path_and_base_class(sample_model_file, tmp_path):
    code = main([
        str(sample_model_file),
        "-o", str(tmp_path),
        "--module-path", "sdk/v4",
        "--base-class", "Resource",
    ])

    assert code == 0
    content = (tmp_path / "sdk" / "v4" / "types.rb").read_text(encoding="utf-8")
    assert "  class Identified < Resource\n" in content


def test_missing_model_file(tmp_path):
    assert main([str(tmp_path / "missing.json"), "-o", str(tmp_path)]) == 1


def test_invalid_model(tmp_path):
    model_file = tmp_path / "model.json"
    model_file.write_text('{"types": [{"kind": "struct", "name": "A", "base": "B"}]}')

    assert main([str(model_file), "-o", str(tmp_path / "out")]) == 1
    assert not (tmp_path / "out").exists()


def test_unwritable_output(sample_model_file, tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")

    assert main([str(sample_model_file), "-o", str(blocker)]) == 1


def test_model_with_wrong_value_types(tmp_path):
    model_file = tmp_path / "model.json"
    model_file.write_text('{"types": [{"kind": "struct", "name": 5}]}')

    assert main([str(model_file), "-o", str(tmp_path / "out")]) == 1
    assert not (tmp_path / "out").exists()
