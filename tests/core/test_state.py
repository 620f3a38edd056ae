"""Tests for assessment state."""

import pytest

from jointcount.anatomy.joint_catalog import AssessmentType
from jointcount.core.errors import InvalidSelectionError, NotFoundError
from jointcount.core.state import (
    AssessmentJoint, AssessmentState, format_selection, parse_selection,
)


def test_tjc_includes_all_joints():
    state = AssessmentState.create("tjc")
    assert state.total_count() == 68
    assert [j.id for j in state.joints()] == list(range(1, 69))


def test_sjc_excludes_hips():
    state = AssessmentState.create("sjc", set())
    ids = [j.id for j in state.joints()]
    assert state.total_count() == 66
    assert 12 not in ids and 13 not in ids
    assert all("hip" not in j.name for j in state.joints())
    assert ids == [i for i in range(1, 69) if i not in (12, 13)]


def test_accepts_enum_and_mixed_case():
    assert AssessmentState.create(AssessmentType.SJC).type is AssessmentType.SJC
    assert AssessmentState.create(" TJC ").type is AssessmentType.TJC


def test_unknown_type():
    with pytest.raises(ValueError):
        AssessmentState.create("xjc")


def test_preselected():
    state = AssessmentState.create("tjc", preselected={3, 9})
    assert state.selected_count() == 2
    for joint in state.joints():
        assert joint.selected == (joint.id in (3, 9))


def test_preselected_string_form():
    state = AssessmentState.create("tjc", "3;9")
    assert state.selected_ids() == [3, 9]
    assert AssessmentState.create("tjc", "").selected_count() == 0
    assert AssessmentState.create("tjc", " 9 ; 3 ;").selected_ids() == [3, 9]


def test_preselected_duplicates_counted_once():
    state = AssessmentState.create("tjc", [5, 5])
    assert state.selected_count() == 1


def test_preselected_hip_invalid_for_sjc():
    with pytest.raises(InvalidSelectionError):
        AssessmentState.create("sjc", preselected={12})


def test_preselected_out_of_range():
    with pytest.raises(InvalidSelectionError):
        AssessmentState.create("tjc", [0])
    with pytest.raises(InvalidSelectionError):
        AssessmentState.create("tjc", "69")


def test_preselected_non_integer():
    with pytest.raises(InvalidSelectionError):
        AssessmentState.create("tjc", "3;knee")
    with pytest.raises(InvalidSelectionError):
        AssessmentState.create("tjc", [3.0])


def test_toggle_returns_new_state():
    state = AssessmentState.create("tjc")
    assert state.toggle(16) is True
    assert state.is_selected(16)
    assert state.selected_count() == 1
    assert state.toggle(16) is False
    assert state.selected_count() == 0


def test_toggle_twice_is_identity():
    state = AssessmentState.create("tjc", [3, 9])
    before = state.joints()
    state.toggle(9)
    state.toggle(9)
    assert state.joints() == before
    assert state.selected_count() == 2


def test_toggle_unknown_id():
    state = AssessmentState.create("sjc")
    with pytest.raises(NotFoundError):
        state.toggle(12)
    with pytest.raises(NotFoundError):
        state.toggle(99)
    assert state.selected_count() == 0


def test_not_found_is_key_error():
    state = AssessmentState.create("tjc")
    with pytest.raises(KeyError):
        state.toggle(0)


def test_joints_are_snapshots():
    state = AssessmentState.create("tjc")
    joints = state.joints()
    assert isinstance(joints[0], AssessmentJoint)
    with pytest.raises(AttributeError):
        joints[0].selected = True
    state.toggle(1)
    assert joints[0].selected is False
    assert state.joints()[0].selected is True


def test_instances_do_not_share_state():
    a = AssessmentState.create("tjc")
    b = AssessmentState.create("tjc")
    a.toggle(1)
    assert b.selected_count() == 0


def test_status_text():
    state = AssessmentState.create("tjc", [1, 2, 3])
    assert state.status_text() == "TJC 3 / 68"
    assert AssessmentState.create("sjc").status_text() == "SJC 0 / 66"


def test_selection_string_in_catalog_order():
    state = AssessmentState.create("tjc", [9, 3])
    assert state.selection_string() == "3;9"
    again = AssessmentState.create("tjc", state.selection_string())
    assert again.selected_ids() == [3, 9]


def test_parse_and_format_selection():
    assert parse_selection(None) == []
    assert parse_selection("1;2") == [1, 2]
    assert parse_selection((4, 5)) == [4, 5]
    assert format_selection([]) == ""
    assert format_selection([7, 8]) == "7;8"
