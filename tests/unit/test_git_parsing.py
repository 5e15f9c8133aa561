from __future__ import annotations

from repokit.git.parsing import (
    FileStatus,
    format_status,
    parse_branches,
    parse_remotes,
    parse_status,
)


def test_parse_status_example() -> None:
    result = parse_status("M  file1.txt\n?? file2.txt\n")

    assert result == {
        "file1.txt": FileStatus(working="M", staging=None),
        "file2.txt": FileStatus(working="?", staging="?"),
    }


def test_parse_status_columns() -> None:
    output = " M src/app.py\nMM src/both.py\nA  new.py\n D gone.py\n"

    result = parse_status(output)

    assert result["src/app.py"] == FileStatus(working=None, staging="M")
    assert result["src/both.py"] == FileStatus(working="M", staging="M")
    assert result["new.py"] == FileStatus(working="A", staging=None)
    assert result["gone.py"] == FileStatus(working=None, staging="D")


def test_parse_status_skips_blank_lines_and_crlf() -> None:
    output = "\n\nM  a.txt\r\n   \n?? b.txt\r\n"

    result = parse_status(output)

    assert list(result) == ["a.txt", "b.txt"]


def test_parse_status_path_with_spaces() -> None:
    result = parse_status("?? docs/release notes.md\n")

    assert result == {"docs/release notes.md": FileStatus(working="?", staging="?")}


def test_parse_status_duplicate_path_last_wins() -> None:
    result = parse_status("M  same.txt\nD  same.txt\n")

    assert result == {"same.txt": FileStatus(working="D", staging=None)}


def test_parse_status_short_line_does_not_crash() -> None:
    assert parse_status("M") == {"": FileStatus(working="M", staging=None)}


def test_parse_status_never_yields_entry_without_codes() -> None:
    result = parse_status("   odd.txt\nM  real.txt\n")

    assert result == {"real.txt": FileStatus(working="M", staging=None)}
    assert all(s.working is not None or s.staging is not None for s in result.values())


def test_parse_status_empty_output() -> None:
    assert parse_status("") == {}


def test_format_status_layout() -> None:
    files = {
        "file1.txt": FileStatus(working="M", staging=None),
        "file2.txt": FileStatus(working=None, staging="D"),
    }

    assert format_status(files) == "M  file1.txt\n D file2.txt\n"
    assert format_status({}) == ""


def test_parse_remotes_example() -> None:
    assert parse_remotes("origin\nupstream\n\n") == ["origin", "upstream"]


def test_parse_remotes_trims_and_keeps_order() -> None:
    assert parse_remotes("  zeta \n\nalpha\n") == ["zeta", "alpha"]


def test_parse_branches_strips_current_marker() -> None:
    output = "  feature/login\n* main\n  release-1.0\n"

    branches = parse_branches(output)

    assert branches == ["feature/login", "main", "release-1.0"]
    assert not any(name.startswith("*") for name in branches)


def test_parse_branches_with_remote_tracking() -> None:
    output = (
        "* main\n"
        "  remotes/origin/HEAD -> origin/main\n"
        "  remotes/origin/main\n"
        "\n"
    )

    assert parse_branches(output) == [
        "main",
        "remotes/origin/HEAD -> origin/main",
        "remotes/origin/main",
    ]


def test_parse_branches_empty_repository() -> None:
    assert parse_branches("") == []
