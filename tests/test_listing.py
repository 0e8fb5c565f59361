"""Tests for listing.render_listing and listing.ListView."""

from __future__ import annotations

import io

import pytest

from dayplanner.entry import Entry
from dayplanner.listing import ListView, render_listing
from dayplanner.messages import BANNER, RULE
from dayplanner.storage import PlannerStorage


def test_render_empty():
    assert render_listing([]) == f"{BANNER}\nMy schedule:\n\n\n{BANNER}\n"


def test_render_single():
    assert render_listing([Entry("9:05", "Buy milk")]) == (
        f"{BANNER}\nMy schedule:\n\nTime: 9:05\nTask: Buy milk\n\n{BANNER}\n"
    )


def test_render_joins_with_rule():
    text = render_listing([Entry("9:00", "a"), Entry("10:00", "b")])
    assert f"Task: a\n{RULE}Time: 10:00" in text


def test_banner_and_rule_widths():
    assert BANNER == "=" * 36
    assert RULE == "-" * 26 + "\n"


def test_list_view_reads_storage(tmp_path):
    path = tmp_path / "plan.txt"
    path.write_text("9:00\nCall mom\n\n14:30\nMeeting\n\n", encoding="utf-8")
    view = ListView(PlannerStorage(path, out=io.StringIO()))
    text = view.render()
    assert text.index("Call mom") < text.index("Meeting")


def test_list_view_read_error_propagates(tmp_path):
    view = ListView(PlannerStorage(tmp_path, out=io.StringIO()))
    with pytest.raises(OSError):
        view.render()
