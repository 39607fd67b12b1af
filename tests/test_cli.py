#!/usr/bin/env python3
"""
Command-line interface: argument handling, exit codes and error reporting.
"""

import io
import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

from bfmacro import cli


def _write(tmp_path, code, name="prog.bf"):
    path = tmp_path / name
    path.write_text(code, encoding="utf-8")
    return str(path)


def test_parse_args_defaults():
    args = cli.parse_args(["prog.bf"])
    assert args.path == "prog.bf"
    assert args.debug == "none"
    assert not args.breakpoints
    assert not args.macros
    assert not args.check
    assert not args.emit


def test_parse_args_flags():
    args = cli.parse_args(["-d", "step", "-b", "-m", "--check", "--emit", "x.bf"])
    assert args.debug == "step"
    assert args.breakpoints and args.macros and args.check and args.emit


def test_missing_path(capsys):
    assert cli.main([]) == cli.EXIT_USAGE
    assert "MissingArgument" in capsys.readouterr().err


def test_runs_program(tmp_path, capsys):
    path = _write(tmp_path, "+" * 65 + ".")
    assert cli.main([path]) == 0
    assert capsys.readouterr().out == "A"


def test_reads_input(tmp_path, capsys, monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(b"q")))
    path = _write(tmp_path, ",.")
    assert cli.main([path]) == 0
    assert capsys.readouterr().out == "q"


def test_emit_resolved_program(tmp_path, capsys):
    path = _write(tmp_path, "two { ++ } @two@ > @two@")
    assert cli.main([path, "-m", "--emit"]) == 0
    assert capsys.readouterr().out == "++>++\n"


def test_missing_file(tmp_path, capsys):
    assert cli.main([str(tmp_path / "absent.bf")]) == cli.EXIT_FAILURE
    assert "IOFailure" in capsys.readouterr().err


def test_macro_error_is_reported(tmp_path, capsys):
    path = _write(tmp_path, "A { @B@ } B { @A@ }")
    assert cli.main([path, "--macros"]) == cli.EXIT_FAILURE
    err = capsys.readouterr().err
    assert err.startswith("error: RecursiveMacroReference")


def test_check_flag(tmp_path, capsys):
    path = _write(tmp_path, "]")
    assert cli.main([path]) == 0
    assert cli.main([path, "--check"]) == cli.EXIT_FAILURE
    assert "UnmatchedBracket" in capsys.readouterr().err
