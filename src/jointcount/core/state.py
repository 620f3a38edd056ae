"""Per-canvas assessment state: which joints are included and selected."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Union

from jointcount.anatomy.joint_catalog import AssessmentType, joints_for
from jointcount.core.errors import InvalidSelectionError, NotFoundError


Selection = Union[str, Iterable[int], None]

SELECTION_SEPARATOR = ";"


@dataclass(frozen=True)
class AssessmentJoint:
    """Read-only snapshot of one joint in an assessment."""
    id: int
    name: str
    selected: bool = False


def parse_selection(selection: Selection) -> list[int]:
    """Normalise a preselection to a list of ids.

    Accepts an iterable of ints or the form-field string ``"3;9"``. An
    empty string or None means nothing is selected.
    """
    if selection is None:
        return []
    if isinstance(selection, str):
        tokens = [t.strip() for t in selection.strip().split(SELECTION_SEPARATOR)]
        ids = []
        for token in tokens:
            if not token:
                continue
            try:
                ids.append(int(token))
            except ValueError:
                raise InvalidSelectionError(
                    f"selected joint {token!r} is not an integer id") from None
        return ids
    ids = []
    for value in selection:
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidSelectionError(f"selected joint {value!r} is not an integer id")
        ids.append(value)
    return ids


def format_selection(ids: Iterable[int]) -> str:
    return SELECTION_SEPARATOR.join(str(i) for i in ids)


class AssessmentState:
    """Joint list of one assessment with a selected flag per joint.

    Create instances with :meth:`create`; every canvas owns its own state.
    """

    def __init__(self, assessment_type: AssessmentType, names: dict[int, str]):
        self.type = assessment_type
        self._names = names
        self._order: tuple[int, ...] = tuple(names)
        self._selected: dict[int, bool] = {joint_id: False for joint_id in self._order}
        self._selected_count = 0

    @classmethod
    def create(
        cls,
        assessment_type: AssessmentType | str,
        preselected: Selection = (),
    ) -> "AssessmentState":
        """Build the filtered joint list and mark ``preselected`` ids selected.

        Raises InvalidSelectionError if a preselected id is not part of the
        filtered list, e.g. a hip for SJC.
        """
        kind = AssessmentType.parse(assessment_type)
        state = cls(kind, {j.id: j.name for j in joints_for(kind)})

        ids = parse_selection(preselected)
        invalid = [i for i in ids if i not in state._selected]
        if invalid:
            raise InvalidSelectionError(
                f"joint(s) {format_selection(invalid)} not valid for {kind.label}")
        for joint_id in ids:
            if not state._selected[joint_id]:
                state._selected[joint_id] = True
                state._selected_count += 1
        return state

    # ── Mutation ──

    def toggle(self, joint_id: int) -> bool:
        """Flip the selected flag of ``joint_id`` and return the new value."""
        if joint_id not in self._selected:
            raise NotFoundError(joint_id, scope=f"{self.type.label} assessment")
        selected = not self._selected[joint_id]
        self._selected[joint_id] = selected
        self._selected_count += 1 if selected else -1
        return selected

    # ── Queries ──

    def __contains__(self, joint_id: object) -> bool:
        return joint_id in self._selected

    def __len__(self) -> int:
        return len(self._order)

    def is_selected(self, joint_id: int) -> bool:
        if joint_id not in self._selected:
            raise NotFoundError(joint_id, scope=f"{self.type.label} assessment")
        return self._selected[joint_id]

    def name(self, joint_id: int) -> str:
        if joint_id not in self._names:
            raise NotFoundError(joint_id, scope=f"{self.type.label} assessment")
        return self._names[joint_id]

    def selected_count(self) -> int:
        return self._selected_count

    def total_count(self) -> int:
        return len(self._order)

    def ids(self) -> tuple[int, ...]:
        return self._order

    def joints(self) -> tuple[AssessmentJoint, ...]:
        return tuple(
            AssessmentJoint(joint_id, self._names[joint_id], self._selected[joint_id])
            for joint_id in self._order
        )

    def selected_ids(self) -> list[int]:
        return [joint_id for joint_id in self._order if self._selected[joint_id]]

    def selection_string(self) -> str:
        """Selected ids in the ``"3;9"`` form accepted by :meth:`create`."""
        return format_selection(self.selected_ids())

    def status_text(self) -> str:
        return f"{self.type.label} {self.selected_count()} / {self.total_count()}"

    def __repr__(self) -> str:
        return f"<AssessmentState {self.status_text()}>"
