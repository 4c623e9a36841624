"""Rendering of a dab's opacity mask for a single tile.

The mask is run-length encoded as a flat list of 16-bit values. Each
non-zero value is the opacity of the next pixel, in fixed point with
``1 << 15`` meaning fully opaque. A zero is followed by a skip count,
which is four times the number of pixels to skip (one step per RGBA
channel), and a zero followed by a zero ends the mask. Pixels are
visited row by row across a tile of ``TILE_SIZE`` by ``TILE_SIZE``.
"""

from __future__ import annotations

import math
from typing import List, Sequence

__all__ = ["TILE_SIZE", "OPAQUE", "render_dab_mask", "decode_mask"]

TILE_SIZE = 64
OPAQUE = 1 << 15

_RAD_AREA_1 = math.sqrt(1.0 / math.pi)  # radius of a circle with area 1


def _clamp(value: float, low: float, high: float) -> float:
    if value > high:
        return high
    if value < low:
        return low
    return value


def _r_sample(x: float, y: float, aspect_ratio: float, sn: float, cs: float) -> float:
    yyr = (y * cs - x * sn) * aspect_ratio
    xxr = y * sn + x * cs
    return yyr * yyr + xxr * xxr


def _rr(
    xp: int,
    yp: int,
    x: float,
    y: float,
    aspect_ratio: float,
    sn: float,
    cs: float,
    one_over_radius2: float,
) -> float:
    yy = yp + 0.5 - y
    xx = xp + 0.5 - x
    return _r_sample(xx, yy, aspect_ratio, sn, cs) * one_over_radius2


def _rr_antialiased(
    xp: int,
    yp: int,
    x: float,
    y: float,
    aspect_ratio: float,
    sn: float,
    cs: float,
    one_over_radius2: float,
    r_aa_start: float,
) -> float:
    """Squared normalised distance of a pixel, smoothed for small dabs.

    The visibility at the point of the pixel nearest the dab's centre is
    divided by one plus how much more a point a fixed distance further
    away is occluded.
    """
    pixel_right = x - xp
    pixel_bottom = y - yp
    pixel_center_x = pixel_right - 0.5
    pixel_center_y = pixel_bottom - 0.5
    pixel_left = pixel_right - 1.0
    pixel_top = pixel_bottom - 1.0

    if pixel_left < 0 < pixel_right and pixel_top < 0 < pixel_bottom:
        nearest_x = nearest_y = 0.0
        rr_near = 0.0
    else:
        l2 = cs * cs + sn * sn
        t = (pixel_center_x * cs + pixel_center_y * sn) / l2
        nearest_x = _clamp(cs * t, pixel_left, pixel_right)
        nearest_y = _clamp(sn * t, pixel_top, pixel_bottom)
        rr_near = _r_sample(nearest_x, nearest_y, aspect_ratio, sn, cs) * one_over_radius2

    if rr_near > 1.0:
        return rr_near

    # Which side of the dab's line the pixel centre lies on.
    vx, vy = cs, -sn
    center_sign = (pixel_center_x - vx) * (-vy) - vx * (pixel_center_y - vy)

    if center_sign < 0:
        farthest_x = nearest_x - sn * _RAD_AREA_1
        farthest_y = nearest_y + cs * _RAD_AREA_1
    else:
        farthest_x = nearest_x + sn * _RAD_AREA_1
        farthest_y = nearest_y - cs * _RAD_AREA_1

    r_far = _r_sample(farthest_x, farthest_y, aspect_ratio, sn, cs)
    rr_far = r_far * one_over_radius2

    if r_far < r_aa_start:
        return (rr_far + rr_near) * 0.5

    visibility_near = (1.0 - rr_near) / (1.0 + (rr_far - rr_near))
    return 1.0 - visibility_near


def render_dab_mask(
    x: float,
    y: float,
    radius: float,
    hardness: float,
    softness: float,
    aspect_ratio: float,
    angle: float,
) -> List[int]:
    """Return the run-length encoded opacity mask of a dab on one tile.

    ``x`` and ``y`` are relative to the tile's top-left corner, ``angle``
    is in degrees. Hardness is clamped to [0, 1] and must not end up zero;
    aspect ratios below 1 are treated as 1.
    """
    hardness = _clamp(hardness, 0.0, 1.0)
    if hardness == 0.0:
        raise ValueError("hardness must be greater than zero")
    if aspect_ratio < 1.0:
        aspect_ratio = 1.0

    # Opacity falls off along two linear segments of rr.
    seg1_offset = 1.0 - softness
    seg1_slope = -(1.0 / hardness - 1.0) * (1.0 - softness)
    if hardness < 1.0:
        seg2_offset = hardness / (1.0 - hardness) * (1.0 - softness)
        seg2_slope = -hardness / (1.0 - hardness) * (1.0 - softness)
    else:
        seg2_offset = seg2_slope = 0.0  # never used when hardness is 1

    angle_rad = angle / 360.0 * 2.0 * math.pi
    cs = math.cos(angle_rad)
    sn = math.sin(angle_rad)

    r_fringe = radius + 1.0
    x0 = max(math.floor(x - r_fringe), 0)
    y0 = max(math.floor(y - r_fringe), 0)
    x1 = min(math.floor(x + r_fringe), TILE_SIZE - 1)
    y1 = min(math.floor(y + r_fringe), TILE_SIZE - 1)
    one_over_radius2 = 1.0 / (radius * radius)

    if radius < 3.0:
        aa_border = 1.0
        r_aa_start = radius - aa_border if radius > aa_border else 0.0
        r_aa_start *= r_aa_start / aspect_ratio

        def rr_at(xp: int, yp: int) -> float:
            return _rr_antialiased(
                xp, yp, x, y, aspect_ratio, sn, cs, one_over_radius2, r_aa_start
            )

    else:

        def rr_at(xp: int, yp: int) -> float:
            return _rr(xp, yp, x, y, aspect_ratio, sn, cs, one_over_radius2)

    mask: List[int] = []
    skip = y0 * TILE_SIZE
    for yp in range(y0, y1 + 1):
        skip += x0
        xp = x0
        for xp in range(x0, x1 + 1):
            rr = rr_at(xp, yp)
            if rr > 1.0:
                opa = 0.0
            elif rr <= hardness:
                opa = seg1_offset + rr * seg1_slope
            else:
                opa = seg2_offset + rr * seg2_slope
            value = min(int(opa * OPAQUE), 0xFFFF)
            if value <= 0:
                skip += 1
                continue
            if skip:
                mask.extend((0, skip * 4))
                skip = 0
            mask.append(value)
        else:
            xp = x1 + 1 if x1 >= x0 else x0
        skip += TILE_SIZE - xp
    mask.extend((0, 0))
    return mask


def decode_mask(mask: Sequence[int]) -> List[int]:
    """Expand an encoded mask into one opacity per tile pixel, row by row."""
    pixels = [0] * (TILE_SIZE * TILE_SIZE)
    pos = 0
    values = iter(mask)
    for value in values:
        if value:
            if pos >= len(pixels):
                raise ValueError("mask covers more pixels than a tile holds")
            pixels[pos] = value
            pos += 1
            continue
        try:
            skip = next(values)
        except StopIteration:
            raise ValueError("mask ends inside a skip marker") from None
        if skip == 0:
            return pixels
        if skip % 4:
            raise ValueError(f"skip count {skip} is not a multiple of 4")
        pos += skip // 4
    raise ValueError("mask has no terminator")