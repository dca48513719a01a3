import re

import pytest

from openrm import printing

FIELD = re.compile(r"(\w+):( *-?\d+\.\d+)")


def _fields(text):
    return FIELD.findall(text.strip("\n"))


def test_print1d_exact(capsys):
    printing.print1d(1.5, "a")
    assert capsys.readouterr().out == "a:  1.5000\n"


def test_print2d_exact(capsys):
    printing.print2d(1.25, -2.5, "x", "y")
    assert capsys.readouterr().out == "x:   1.250  y:-2.500\n"


def test_print3d_exact(capsys):
    printing.print3d(1, 2, 3, "a", "b", "c")
    assert capsys.readouterr().out == "a:  1.00  b:  2.00  c:  3.00\n"


def test_print4d_fields(capsys):
    values = (0.5, -1.25, 3.75, 10.0)
    labels = ("p", "q", "r", "s")
    printing.print4d(*values, *labels)
    fields = _fields(capsys.readouterr().out)
    assert [label for label, _ in fields] == list(labels)
    assert [float(v) for _, v in fields] == pytest.approx(list(values))
    assert all(len(v) == 6 for _, v in fields)


def test_print5d_fields(capsys):
    values = (1.0, 2.5, -3.25, 4.75, 0.0)
    labels = ("a", "b", "c", "d", "e")
    printing.print5d(*values, *labels)
    out = capsys.readouterr().out
    fields = _fields(out)
    assert [label for label, _ in fields] == list(labels)
    assert [float(v) for _, v in fields] == pytest.approx(list(values))
    assert out.endswith("\n") and out.count("\n") == 1


def test_print6d_fields(capsys):
    values = (1.5, 2.5, 3.5, -4.5, 5.5, 6.5)
    labels = ("u1", "u2", "u3", "u4", "u5", "u6")
    printing.print6d(*values, *labels)
    fields = _fields(capsys.readouterr().out)
    assert [label for label, _ in fields] == list(labels)
    assert [float(v) for _, v in fields] == pytest.approx(list(values))
    assert all(re.fullmatch(r" *-?\d+\.\d{2}", v) for _, v in fields)


def test_print8d_fields(capsys):
    values = (0.25, 0.5, 0.75, 1.0, -1.0, -0.75, -0.5, -0.25)
    labels = tuple("abcdefgh")
    printing.print8d(*values, *labels)
    out = capsys.readouterr().out
    fields = _fields(out)
    assert [label for label, _ in fields] == list(labels)
    assert [float(v) for _, v in fields] == pytest.approx(list(values))
    assert out.rstrip("\n").count("  ") >= len(values) - 1