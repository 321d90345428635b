"""Tests for the command line driver."""

import os

from json_const_generator.cli import build_parser, main


def test_parser_defaults():
    args = build_parser().parse_args(["lang", "en_US"])
    assert args.dir_path == "lang"
    assert args.lang == "en_US"
    assert args.output_dir == "."
    assert args.style == "rust"
    assert args.namespace is None
    assert not args.substitute_invalid

def test_main_writes_file(lang_dir, tmp_path, capsys):
    code = main([lang_dir, "ru_RU", "-o", str(tmp_path)])
    assert code == 0
    output_path = tmp_path / "ru_RU.rs"
    assert output_path.exists()
    assert 'pub const PING: &str = "понг";' in output_path.read_text(encoding="utf-8")
    assert capsys.readouterr().out.strip() == f"Constants generated: {output_path}"

def test_main_quiet(lang_dir, tmp_path, capsys):
    assert main([lang_dir, "de_DE", "-o", str(tmp_path), "-q", "-s", "cpp"]) == 0
    assert (tmp_path / "de_DE.hpp").exists()
    assert capsys.readouterr().out == ""

def test_main_stdout(lang_dir, capsys):
    assert main([lang_dir, "fr_FR", "--stdout", "-s", "python"]) == 0
    assert 'FR_FR: str = "false"' in capsys.readouterr().out

def test_main_custom_namespace(lang_dir, capsys):
    assert main([lang_dir, "en_UK", "--stdout", "--namespace", "strings"]) == 0
    assert "pub mod strings {" in capsys.readouterr().out

def test_main_missing_language(lang_dir, tmp_path, capsys):
    code = main([lang_dir, "xx_XX", "-o", str(tmp_path)])
    assert code != 0
    err = capsys.readouterr().err
    assert len(err.strip().splitlines()) == 1
    assert "xx_XX" in err
    assert os.listdir(tmp_path) == []

def test_main_bad_document(tmp_path, capsys):
    src = tmp_path / "src"
    src.mkdir()
    (src / "en_US.json").write_text('{"bad": [{"x": 1}]}', encoding="utf-8")
    out = tmp_path / "out"

    assert main([str(src), "en_US", "-o", str(out)]) == 1
    err = capsys.readouterr().err.strip()
    assert err.startswith("[json_const_generator:parse:ERROR] en_US.json:")
    assert "bad[0]" in err
    assert not out.exists()

def test_main_substitute_invalid(tmp_path, capsys):
    (tmp_path / "en_US.json").write_text('{"hello world": "hi"}', encoding="utf-8")
    assert main([str(tmp_path), "en_US", "--stdout"]) == 1
    capsys.readouterr()

    assert main([str(tmp_path), "en_US", "--stdout", "--substitute-invalid"]) == 0
    assert 'pub const HELLO_WORLD: &str = "hi";' in capsys.readouterr().out

def test_main_lone_surrogate(tmp_path, capsys):
    src = tmp_path / "src"
    src.mkdir()
    (src / "en_US.json").write_text('{"a": "\\ud800"}', encoding="utf-8")
    out = tmp_path / "out"

    assert main([str(src), "en_US", "-o", str(out)]) == 1
    err = capsys.readouterr().err.strip()
    assert len(err.splitlines()) == 1
    assert err.startswith("[json_const_generator:parse:ERROR] en_US.json: Cannot deserialize")
    assert "lone surrogate" in err
    assert not out.exists()

    assert main([str(src), "en_US", "--stdout"]) == 1
    assert capsys.readouterr().out == ""

def test_main_deep_nesting(tmp_path, capsys):
    (tmp_path / "en_US.json").write_text('{"a":' * 300 + '"x"' + '}' * 300, encoding="utf-8")
    assert main([str(tmp_path), "en_US", "--stdout"]) == 1
    err = capsys.readouterr().err.strip()
    assert len(err.splitlines()) == 1
    assert "nesting too deep" in err

def test_main_python_private_name(tmp_path, capsys):
    (tmp_path / "en_US.json").write_text('{"__x": "v"}', encoding="utf-8")
    assert main([str(tmp_path), "en_US", "--stdout", "-s", "python"]) == 1
    assert "__X" in capsys.readouterr().err

    assert main([str(tmp_path), "en_US", "--stdout", "-s", "python", "--substitute-invalid"]) == 0
    assert '    _X: str = "v"' in capsys.readouterr().out
