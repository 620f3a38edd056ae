"""Tests for the main window and command line."""

import pytest

from jointcount.anatomy.joint_catalog import AssessmentType
from jointcount.app import build_parser
from jointcount.core.errors import AssetLoadError
from jointcount.core.events import EventBus, EventType
from jointcount.export.snapshot_export import read_snapshot_metadata
from jointcount.ui.main_window import MainWindow, load_failure_message


@pytest.fixture
def window(qapp, body_image_path, wait):
    win = MainWindow(EventBus(), {"tjc": "3;9"}, image_path=body_image_path,
                     play_sound=False, scale=0.5)
    assert wait(lambda: all(c.is_ready for c in win.canvases))
    return win


def test_one_canvas_per_type(window):
    kinds = [c.assessment_type for c in window.canvases]
    assert kinds == [AssessmentType.TJC, AssessmentType.SJC]
    assert window.results() == {"tjc": [3, 9], "sjc": []}


def test_selection_label_follows_clicks(window):
    sjc = window.canvas_for(AssessmentType.SJC)
    knee = sjc.locations[16]
    sjc.click_at(knee.x, knee.y)
    assert window._selection_labels[AssessmentType.SJC].text() == "Selected: 16"
    assert window._selection_labels[AssessmentType.TJC].text() == "Selected: 3;9"


def test_hover_shows_in_status_bar(window):
    tjc = window.canvas_for(AssessmentType.TJC)
    loc = tjc.locations[12]
    tjc.hover_at(loc.x, loc.y)
    assert window.status_bar.currentMessage() == "12: Right hip"
    tjc.hover_at(1, 1)
    assert window.status_bar.currentMessage() == ""


def test_export_snapshots(window, tmp_path):
    saved = []
    window.event_bus.subscribe(EventType.SNAPSHOT_SAVED, lambda path: saved.append(path))
    paths = window.export_snapshots(tmp_path)
    assert [p.name for p in paths] == ["tjc.png", "sjc.png"]
    assert saved == paths
    assert read_snapshot_metadata(paths[0])["selected"] == "3;9"


def test_parser_defaults():
    args = build_parser().parse_args([])
    assert args.scale is None
    assert args.tjc == ""
    assert args.no_sound is False


def test_parser_options(tmp_path):
    args = build_parser().parse_args(
        ["--scale", "0.75", "--tjc", "3;9", "--no-sound", "--export", str(tmp_path)])
    assert args.scale == 0.75
    assert args.tjc == "3;9"
    assert args.no_sound is True
    assert args.export == tmp_path


def test_load_failure_message_names_generator():
    message = load_failure_message(AssetLoadError("images/man.png", "file not found"))
    assert message.startswith("failed to load images/man.png: file not found")
    assert "tools/generate_placeholder_assets.py" in message


def test_help_mentions_generator():
    assert "tools/generate_placeholder_assets.py" in build_parser().format_help()
