from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path_factory, monkeypatch):
    # Keep IgnoreOptions() from picking up a .lintignore in the real working directory
    empty = tmp_path_factory.mktemp("cwd")
    monkeypatch.chdir(empty)
    return empty


@pytest.fixture
def fixture_dir(tmp_path: Path) -> Path:
    root = tmp_path / "ignored-paths"
    root.mkdir()
    (root / ".lintignore").write_text("/node_modules/\nundef.js\n")
    (root / ".lintignoreWithComments").write_text(
        "# this is a comment\nfoo.js\n\n   # indented comment\nbar.js\n"
    )
    (root / ".lintignoreWithNegation").write_text("dir/*\n!dir/foo.js\n")

    custom = root / "custom-name"
    (custom / "subdirectory").mkdir(parents=True)
    (custom / "ignore-file").write_text("undef.js\n")

    (root / "no-ignore-file").mkdir()
    (root / "not-a-directory").write_text("")
    return root
