"""Bulk construction of assessment canvases inside an existing widget tree.

Placeholders are plain widgets carrying a dynamic ``class`` property, the
same convention Qt style sheets use for class selectors::

    placeholder.setProperty("class", "jc tjc")

Every descendant whose class list contains ``jc`` gets a canvas; ``tjc``
in the class list makes it a tender count, anything else a swollen count.
"""

from __future__ import annotations

import logging
from typing import Mapping, Optional

from PySide6.QtWidgets import QVBoxLayout, QWidget

from jointcount.anatomy.joint_catalog import AssessmentType
from jointcount.core.state import Selection
from jointcount.ui.widgets.assessment_canvas import AssessmentCanvas

logger = logging.getLogger(__name__)

PLACEHOLDER_CLASS = "jc"


def widget_classes(widget: QWidget) -> list[str]:
    value = widget.property("class")
    if not value:
        return []
    if isinstance(value, str):
        return value.split()
    return [str(v) for v in value]


def classify(widget: QWidget) -> Optional[AssessmentType]:
    """Assessment type of a placeholder, or None if it is not one."""
    classes = widget_classes(widget)
    if PLACEHOLDER_CLASS not in classes:
        return None
    return AssessmentType.TJC if AssessmentType.TJC.value in classes else AssessmentType.SJC


def find_placeholders(root: QWidget) -> list[QWidget]:
    """Placeholder widgets under ``root`` (inclusive), in tree order."""
    found = []

    def visit(widget: QWidget) -> None:
        if classify(widget) is not None:
            found.append(widget)
            return  # a canvas placeholder is a leaf
        for child in widget.children():
            if isinstance(child, QWidget):
                visit(child)

    visit(root)
    return found


def initialize(
    root: QWidget,
    selected_joints: Optional[Mapping[str, Selection]] = None,
    **canvas_kwargs,
) -> list[AssessmentCanvas]:
    """Create one canvas per placeholder under ``root`` and return them.

    ``selected_joints`` maps ``"tjc"``/``"sjc"`` to the ids to preselect
    for every canvas of that type. Remaining keyword arguments are passed
    to :class:`AssessmentCanvas`.
    """
    selected_joints = selected_joints or {}
    canvases = []
    for placeholder in find_placeholders(root):
        kind = classify(placeholder)
        preselected = selected_joints.get(kind.value, ())
        canvas = AssessmentCanvas(kind, preselected=preselected,
                                  parent=placeholder, **canvas_kwargs)

        layout = placeholder.layout()
        if layout is None:
            layout = QVBoxLayout(placeholder)
            layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(canvas)
        canvases.append(canvas)

    logger.info("Initialized %d joint count canvas(es)", len(canvases))
    return canvases
