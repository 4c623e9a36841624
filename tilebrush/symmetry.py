"""Symmetry settings and the affine transforms that mirror dabs."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import IntEnum
from typing import List, Optional, Tuple


class SymmetryType(IntEnum):
    """Kinds of symmetry painting."""

    VERTICAL = 0  # reflection across the y-axis
    HORIZONTAL = 1  # reflection across the x-axis
    VERTHORZ = 2  # reflection across both axes
    ROTATIONAL = 3  # rotation by N symmetry lines around a point
    SNOWFLAKE = 4  # rotation plus reflection across the N lines


@dataclass(frozen=True)
class SymmetryState:
    """The parameters from which the symmetry transforms are computed."""

    type: SymmetryType = SymmetryType.VERTICAL
    center_x: float = 0.0
    center_y: float = 0.0
    angle: float = 0.0
    num_lines: int = 2


def num_matrices_required(state: Optional[SymmetryState]) -> int:
    """Return how many transforms ``state`` needs besides the original dab."""
    if state is None:
        return 0
    if state.type in (SymmetryType.VERTICAL, SymmetryType.HORIZONTAL):
        return 1
    if state.type == SymmetryType.VERTHORZ:
        return 3
    if state.type == SymmetryType.ROTATIONAL:
        return state.num_lines - 1
    if state.type == SymmetryType.SNOWFLAKE:
        return 2 * state.num_lines - 1
    return 0


@dataclass(frozen=True)
class Transform:
    """A 2D affine transform: x' = xx*x + xy*y + x0, y' = yx*x + yy*y + y0."""

    xx: float = 1.0
    xy: float = 0.0
    x0: float = 0.0
    yx: float = 0.0
    yy: float = 1.0
    y0: float = 0.0

    @classmethod
    def identity(cls) -> "Transform":
        return cls()

    def _then(self, f: "Transform") -> "Transform":
        """Return the transform applying ``self`` first and ``f`` second."""
        return Transform(
            xx=f.xx * self.xx + f.xy * self.yx,
            xy=f.xx * self.xy + f.xy * self.yy,
            x0=f.xx * self.x0 + f.xy * self.y0 + f.x0,
            yx=f.yx * self.xx + f.yy * self.yx,
            yy=f.yx * self.xy + f.yy * self.yy,
            y0=f.yx * self.x0 + f.yy * self.y0 + f.y0,
        )

    def translate(self, x: float, y: float) -> "Transform":
        """Follow this transform by a translation of ``(x, y)``."""
        return self._then(Transform(x0=x, y0=y))

    def rotate_cw(self, angle: float) -> "Transform":
        """Follow this transform by a clockwise rotation of ``angle`` radians."""
        cs, sn = math.cos(-angle), math.sin(-angle)
        return self._then(Transform(xx=cs, xy=-sn, yx=sn, yy=cs))

    def reflect(self, angle: float) -> "Transform":
        """Follow this transform by a reflection across the line at ``angle`` radians."""
        lx, ly = math.cos(angle), math.sin(angle)
        return self._then(
            Transform(
                xx=lx * lx - ly * ly,
                xy=2 * lx * ly,
                yx=2 * lx * ly,
                yy=ly * ly - lx * lx,
            )
        )

    def transform_point(self, x: float, y: float) -> Tuple[float, float]:
        """Apply the transform to the point ``(x, y)``."""
        return (
            self.xx * x + self.xy * y + self.x0,
            self.yx * x + self.yy * y + self.y0,
        )


@dataclass
class SymmetryData:
    """Current and pending symmetry settings with the transforms of the current one.

    Changing the pending state only marks it; transforms are recomputed by
    :meth:`update`, which should not be called in the middle of drawing.
    """

    state_current: Optional[SymmetryState] = None
    state_pending: SymmetryState = field(default_factory=SymmetryState)
    pending_changes: bool = True
    active: bool = False
    matrices: List[Transform] = field(default_factory=list)

    def __init__(self) -> None:
        self.state_current = None
        self.state_pending = SymmetryState()
        self.pending_changes = True
        self.active = False
        self.matrices = []
        self.update()

    def update(self) -> None:
        """Recompute the transforms if the pending state differs from the current one."""
        if not self.pending_changes or self.state_current == self.state_pending:
            return
        symm = self.state_pending
        self.state_current = symm
        cx, cy = symm.center_x, symm.center_y
        angle = math.radians(symm.angle)
        n = symm.num_lines
        rot_angle = 2.0 * math.pi / n
        base = Transform.identity().translate(-cx, -cy)

        if symm.type in (SymmetryType.HORIZONTAL, SymmetryType.VERTICAL):
            if symm.type == SymmetryType.VERTICAL:
                angle += math.pi / 2.0
            matrices = [base.reflect(-angle)]
        elif symm.type == SymmetryType.VERTHORZ:
            v_angle = angle + math.pi / 2.0
            first = base.reflect(-angle)
            second = first.reflect(-v_angle)
            third = second.reflect(-angle)
            matrices = [first, second, third]
        else:
            matrices = [base.rotate_cw(rot_angle * i) for i in range(1, n)]
            if symm.type == SymmetryType.SNOWFLAKE:
                matrices.extend(
                    base.rotate_cw(rot_angle * i).reflect(-i * rot_angle - angle)
                    for i in range(n)
                )

        self.matrices = [m.translate(cx, cy) for m in matrices]
        self.pending_changes = False

    def set_pending(
        self,
        active: bool,
        center_x: float,
        center_y: float,
        symmetry_angle: float,
        symmetry_type: SymmetryType,
        rot_symmetry_lines: int,
    ) -> None:
        """Record new settings; nothing is recalculated until :meth:`update`."""
        kind = SymmetryType(symmetry_type)
        self.active = bool(active)
        self.state_pending = SymmetryState(
            type=kind,
            center_x=center_x,
            center_y=center_y,
            angle=symmetry_angle,
            num_lines=max(2, int(rot_symmetry_lines)),
        )
        self.pending_changes = True