# ============================================================
# MUTATION: perturb a single stamp
# - position: +/- 5% of the canvas per axis, clamped after the move
# - rotation: fresh draw in [0, 360), replaces the old angle
# - scale:    +/- 0.5 per axis, clamped to [0.1, 5.0]
# - color:    integer +/- 50 per channel, clamped, alpha capped at 220
# ============================================================

from dataclasses import replace

import numpy as np

from .genome import SCALE_MIN, SCALE_MAX, CHANNEL_MAX, ALPHA_CAP

# --------------------------- CONFIG ---------------------------
POSITION_JITTER = 0.05      # fraction of canvas width / height
SCALE_JITTER    = 0.5
COLOR_JITTER    = 50


def clamp(v, lo, hi): return min(hi, max(lo, v))


def mutate(stamp, canvas_w, canvas_h, rng):
    dx, dy = rng.uniform(-POSITION_JITTER, POSITION_JITTER, size=2)
    x = clamp(stamp.x + canvas_w * float(dx), 0.0, float(canvas_w))
    y = clamp(stamp.y + canvas_h * float(dy), 0.0, float(canvas_h))

    rotation = float(rng.uniform(0.0, 360.0))

    dsx, dsy = rng.uniform(-SCALE_JITTER, SCALE_JITTER, size=2)
    sx = clamp(stamp.sx + float(dsx), SCALE_MIN, SCALE_MAX)
    sy = clamp(stamp.sy + float(dsy), SCALE_MIN, SCALE_MAX)

    delta = rng.integers(-COLOR_JITTER, COLOR_JITTER, size=4, endpoint=True)
    rgba = np.clip(np.array(stamp.color, np.int64) + delta, 0, CHANNEL_MAX)
    r, g, b, a = (int(c) for c in rgba)
    a = min(a, ALPHA_CAP)

    return replace(stamp, x=x, y=y, rotation=rotation, sx=sx, sy=sy,
                   r=r, g=g, b=b, a=a)
