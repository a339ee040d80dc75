from pathlib import Path

import pytest

from conftest import write_roster_xlsx
from twitch_live_board.core.errors import SourceReadError
from twitch_live_board.sources.roster import RosterLoader, is_included, select_identifiers


@pytest.mark.parametrize(
    ("flag", "expected"),
    [
        ("yes", True),
        ("1", True),
        ("true", True),
        ("recently", True),
        ("NO", False),
        ("No", False),
        ("false", False),
        ("FALSE", False),
        ("", False),
    ],
)
def test_inclusion_flag_rules(flag: str, expected: bool) -> None:
    assert is_included("alice", flag) is expected


def test_select_identifiers_trims_and_keeps_row_order() -> None:
    rows = [
        ["  zed ", None, None, None, " yes "],
        ["", None, None, None, "yes"],
        ["amy", None, None, None, "  "],
        ["bob", None, None, None, "no"],
        ["zed", None, None, None, 1],
        ["short-row"],
    ]

    assert select_identifiers(rows) == ["zed", "zed"]


def test_load_identifiers_from_xlsx(tmp_path: Path) -> None:
    path = write_roster_xlsx(
        tmp_path / "streamers.xlsx",
        [
            ["Username", "Name", "Notes", "Region", "Recent"],
            ["alice", None, None, None, "yes"],
            ["bob", None, None, None, "no"],
            ["carol", None, None, None, ""],
            ["dave", "Dave", None, None, "TRUE"],
        ],
    )

    identifiers = RosterLoader(path).load_identifiers()

    assert identifiers == ["alice", "dave"]
    assert len(identifiers) <= 4
    assert all(identifiers)


def test_header_row_is_never_included(tmp_path: Path) -> None:
    path = write_roster_xlsx(
        tmp_path / "streamers.xlsx",
        [["headeruser", None, None, None, "yes"], ["alice", None, None, None, "yes"]],
    )

    assert RosterLoader(path).load_identifiers() == ["alice"]


def test_load_identifiers_from_csv(tmp_path: Path) -> None:
    path = tmp_path / "streamers.csv"
    path.write_text(
        "Username,Name,Notes,Region,Recent\n"
        "alice,,,,yes\n"
        "bob,,,,False\n"
        "erin,,,,x\n"
    )

    assert RosterLoader(path).load_identifiers() == ["alice", "erin"]


def test_missing_roster_file_is_fatal(tmp_path: Path) -> None:
    with pytest.raises(SourceReadError, match="not found"):
        RosterLoader(tmp_path / "streamers.xlsx").load_identifiers()


def test_malformed_roster_file_is_fatal(tmp_path: Path) -> None:
    path = tmp_path / "streamers.xlsx"
    path.write_bytes(b"this is not a workbook")

    with pytest.raises(SourceReadError, match="Unreadable"):
        RosterLoader(path).load_identifiers()
