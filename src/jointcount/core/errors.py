"""Exception hierarchy for joint assessments."""


class JointCountError(Exception):
    """Base class for all JointCount errors."""


class NotFoundError(JointCountError, KeyError):
    """A joint id is not part of the catalog or of an assessment."""

    def __init__(self, joint_id, scope: str = "catalog"):
        self.joint_id = joint_id
        self.scope = scope
        super().__init__(f"joint {joint_id!r} not found in {scope}")

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return self.args[0]


class InvalidScaleError(JointCountError, ValueError):
    """Scale factor is not a positive number."""


class InvalidSelectionError(JointCountError, ValueError):
    """Preselected joints are invalid for the assessment type."""


class AssetLoadError(JointCountError, OSError):
    """A required asset (background image) could not be loaded."""

    def __init__(self, path, reason: str = ""):
        self.path = path
        self.reason = reason
        message = f"failed to load {path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)

    def __str__(self) -> str:
        return self.args[0]
