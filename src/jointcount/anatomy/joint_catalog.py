"""Catalog of the 68 joint sites used in tender/swollen joint counts.

Ids are stable (1..68) and follow the order of the standard assessment
form, which interleaves body sides and regions as they appear on the body
diagram rather than grouping them anatomically.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from jointcount.core.errors import NotFoundError


class Region(Enum):
    """Body-region classifier used to filter joints per assessment type."""
    HIP = "hip"
    OTHER = "other"


class AssessmentType(Enum):
    """TJC counts every joint; SJC excludes the hips."""
    TJC = "tjc"
    SJC = "sjc"

    @classmethod
    def parse(cls, value: "AssessmentType | str") -> "AssessmentType":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"unknown assessment type: {value!r}") from None

    @property
    def label(self) -> str:
        return self.value.upper()

    def includes(self, region: Region) -> bool:
        return self is AssessmentType.TJC or region is not Region.HIP


@dataclass(frozen=True)
class Joint:
    id: int
    name: str
    region: Region


_JOINT_NAMES = (
    "Right TMJ",
    "Left TMJ",
    "Right shoulder",
    "Right AC",
    "Right SC",
    "Left SC",
    "Left AC",
    "Left shoulder",
    "Right elbow",
    "Left elbow",
    "Right wrist",
    "Right hip",
    "Left hip",
    "Left wrist",
    "Right hand MCP 1",
    "Right knee",
    "Left knee",
    "Left hand MCP 1",
    "Right hand MCP 5",
    "Right hand MCP 4",
    "Right hand MCP 3",
    "Right hand MCP 2",
    "Right hand IP1",
    "Left hand IP1",
    "Left hand MCP 2",
    "Left hand MCP 3",
    "Left hand MCP 4",
    "Left hand MCP 5",
    "Right hand PIP 5",
    "Right hand PIP 4",
    "Right hand PIP 3",
    "Right hand PIP 2",
    "Right ankle",
    "Left ankle",
    "Left hand PIP 2",
    "Left hand PIP 3",
    "Left hand PIP 4",
    "Left hand PIP 5",
    "Right hand DIP 5",
    "Right hand DIP 4",
    "Right hand DIP 3",
    "Right hand DIP 2",
    "Left hand DIP 2",
    "Left hand DIP 3",
    "Left hand DIP 4",
    "Left hand DIP 5",
    "Right tarsus",
    "Left tarsus",
    "Right foot MTP 5",
    "Right foot MTP 4",
    "Right foot MTP 3",
    "Right foot MTP 2",
    "Right foot MTP 1",
    "Left foot MTP 1",
    "Left foot MTP 2",
    "Left foot MTP 3",
    "Left foot MTP 4",
    "Left foot MTP 5",
    "Right foot PIP 5",
    "Right foot PIP 4",
    "Right foot PIP 3",
    "Right foot PIP 2",
    "Right foot IP1",
    "Left foot IP1",
    "Left foot PIP 2",
    "Left foot PIP 3",
    "Left foot PIP 4",
    "Left foot PIP 5",
)


def _region_for(name: str) -> Region:
    return Region.HIP if "hip" in name else Region.OTHER


JOINTS: tuple[Joint, ...] = tuple(
    Joint(id=i, name=name, region=_region_for(name))
    for i, name in enumerate(_JOINT_NAMES, start=1)
)
JOINT_COUNT = len(JOINTS)
JOINT_IDS: tuple[int, ...] = tuple(j.id for j in JOINTS)


def lookup(joint_id: int) -> Joint:
    """Return the catalog entry for ``joint_id`` (1..68)."""
    if isinstance(joint_id, bool) or not isinstance(joint_id, int):
        raise NotFoundError(joint_id)
    if not 1 <= joint_id <= JOINT_COUNT:
        raise NotFoundError(joint_id)
    return JOINTS[joint_id - 1]


def all_joints() -> tuple[Joint, ...]:
    return JOINTS


def joints_for(assessment_type: AssessmentType | str) -> tuple[Joint, ...]:
    """Catalog joints included in the given assessment type, in catalog order."""
    kind = AssessmentType.parse(assessment_type)
    return tuple(j for j in JOINTS if kind.includes(j.region))
