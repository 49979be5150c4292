import os

import pytest

from lintignore.config import IgnoreOptions, load_options
from lintignore.errors import InvalidArgument


def test_default_options():
    opts = IgnoreOptions()
    assert opts.ignore is True
    assert opts.cwd == os.getcwd()
    assert opts.ignore_path is None
    assert opts.ignore_pattern is None
    assert opts.dotfiles is False
    assert opts.patterns == []


def test_cwd_made_absolute():
    opts = IgnoreOptions(cwd="sub")
    assert opts.cwd == os.path.join(os.getcwd(), "sub")


def test_single_pattern_string():
    opts = IgnoreOptions(ignore_pattern="build/")
    assert opts.patterns == ["build/"]


@pytest.mark.parametrize(
    "kwargs",
    [
        {"ignore": "yes"},
        {"dotfiles": 1},
        {"cwd": 42},
        {"ignore_path": ["a"]},
        {"ignore_pattern": 3},
        {"ignore_pattern": ["ok", None]},
    ],
)
def test_invalid_options(kwargs):
    with pytest.raises(InvalidArgument):
        IgnoreOptions(**kwargs)


def test_load_options_from_pyproject(tmp_path):
    pyproject = tmp_path / "pyproject.toml"
    pyproject.write_text("""
[tool.lintignore]
ignore-path = "config/lintignore"
ignore-pattern = ["generated/", "!generated/keep.py"]
dotfiles = true
""")
    opts = load_options(tmp_path)
    assert opts.cwd == str(tmp_path)
    assert opts.ignore_path == str(tmp_path / "config" / "lintignore")
    assert opts.patterns == ["generated/", "!generated/keep.py"]
    assert opts.dotfiles is True
    # Defaults still apply for unset values
    assert opts.ignore is True


def test_load_options_missing_file(tmp_path):
    opts = load_options(tmp_path)
    assert opts.cwd == str(tmp_path)
    assert opts.ignore is True


def test_load_options_without_table(tmp_path):
    (tmp_path / "pyproject.toml").write_text("[tool.other]\nx = 1\n")
    opts = load_options(tmp_path)
    assert opts.ignore_pattern is None


def test_load_options_rejects_bad_values(tmp_path):
    (tmp_path / "pyproject.toml").write_text('[tool.lintignore]\nignore = "no"\n')
    with pytest.raises(InvalidArgument):
        load_options(tmp_path)
