"""Tests for the joint catalog."""

import pytest

from jointcount.anatomy.joint_catalog import (
    JOINT_COUNT, AssessmentType, Joint, Region, all_joints, joints_for, lookup,
)
from jointcount.core.errors import NotFoundError


def test_catalog_size_and_ids():
    joints = all_joints()
    assert JOINT_COUNT == 68
    assert [j.id for j in joints] == list(range(1, 69))
    assert len({j.name for j in joints}) == 68


def test_lookup():
    joint = lookup(16)
    assert joint == Joint(16, "Right knee", Region.OTHER)
    assert lookup(1).name == "Right TMJ"
    assert lookup(68).name == "Left foot PIP 5"


@pytest.mark.parametrize("bad", [0, 69, -1, "3", None, 3.0, True])
def test_lookup_unknown(bad):
    with pytest.raises(NotFoundError):
        lookup(bad)


def test_hip_region():
    hips = [j.id for j in all_joints() if j.region is Region.HIP]
    assert hips == [12, 13]


def test_joints_for_type():
    assert len(joints_for("tjc")) == 68
    sjc = joints_for(AssessmentType.SJC)
    assert len(sjc) == 66
    assert all(j.region is Region.OTHER for j in sjc)


def test_assessment_type_parse():
    assert AssessmentType.parse("sjc") is AssessmentType.SJC
    assert AssessmentType.parse(AssessmentType.TJC) is AssessmentType.TJC
    assert AssessmentType.TJC.label == "TJC"
    with pytest.raises(ValueError):
        AssessmentType.parse("das28")


def test_catalog_is_immutable():
    with pytest.raises(AttributeError):
        lookup(1).name = "Jaw"
