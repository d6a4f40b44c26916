from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from orthovox._constants import DRAG_SENSITIVITY

if TYPE_CHECKING:
    from orthovox.model.voxel_grid import VoxelGrid


@dataclass(frozen=True)
class DragAnchor:
    """Pointer position and view angles captured when a drag began."""

    pointer_x: float
    pointer_y: float
    rotation_x: float
    rotation_y: float


@dataclass(frozen=True)
class RotationState:
    """Immutable view orientation for the isometric renderer.

    Every operation returns a new state, so a renderer always sees a
    consistent ``(rotation_x, rotation_y)`` pair.  Angles accumulate
    without wrapping.

    Typical drag handling::

        state = state.begin_drag(event.x, event.y)
        state = state.drag_to(event.x, event.y)   # on every move
        state = state.end_drag()

    Attributes:
        rotation_x: Pitch in radians, about the horizontal axis.
        rotation_y: Yaw in radians, about the vertical axis.
        drag_anchor: Snapshot taken by :meth:`begin_drag`, or ``None``
            when no drag is in progress.
        solid_fingerprint: Fingerprint of the solid these angles were
            chosen for; see :meth:`for_solid`.
        sensitivity: Radians of rotation per unit of pointer movement.
        pitch_enabled: Whether vertical drags change the pitch.
            Horizontal drags always change the yaw.
    """

    rotation_x: float = 0.0
    rotation_y: float = 0.0
    drag_anchor: DragAnchor | None = None
    solid_fingerprint: str | None = None
    sensitivity: float = DRAG_SENSITIVITY
    pitch_enabled: bool = False

    def __post_init__(self) -> None:
        if self.sensitivity <= 0:
            raise ValueError(
                f"sensitivity must be positive, got {self.sensitivity}"
            )

    @property
    def dragging(self) -> bool:
        return self.drag_anchor is not None

    @property
    def angles(self) -> tuple[float, float]:
        """The ``(rotation_x, rotation_y)`` pair."""
        return (self.rotation_x, self.rotation_y)

    def begin_drag(self, pointer_x: float, pointer_y: float) -> RotationState:
        anchor = DragAnchor(pointer_x, pointer_y, self.rotation_x, self.rotation_y)
        return replace(self, drag_anchor=anchor)

    def drag_to(self, pointer_x: float, pointer_y: float) -> RotationState:
        """Rotate relative to the drag anchor.

        Ignored (returns ``self``) when no drag is in progress.
        """
        anchor = self.drag_anchor
        if anchor is None:
            return self
        rotation_y = anchor.rotation_y + (pointer_x - anchor.pointer_x) * self.sensitivity
        rotation_x = anchor.rotation_x
        if self.pitch_enabled:
            rotation_x += (pointer_y - anchor.pointer_y) * self.sensitivity
        return replace(self, rotation_x=rotation_x, rotation_y=rotation_y)

    def end_drag(self) -> RotationState:
        return replace(self, drag_anchor=None)

    def reset(self) -> RotationState:
        """Return to the canonical orientation, dropping any drag."""
        return replace(self, rotation_x=0.0, rotation_y=0.0, drag_anchor=None)

    def for_solid(self, solid: VoxelGrid) -> RotationState:
        """Bind the state to *solid*, resetting the angles if it changed."""
        fingerprint = solid.fingerprint()
        if fingerprint == self.solid_fingerprint:
            return self
        return replace(self.reset(), solid_fingerprint=fingerprint)
