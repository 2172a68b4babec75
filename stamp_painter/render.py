# ============================================================
# RENDER: rasterize a genome of template stamps (numpy + PIL)
# - Each stamp: template centred on its middle, scaled, rotated,
#   moved to (x, y), tinted by RGBA multiply, alpha-over composited
# - One RGBA scratch Image per Renderer, reused every call.
#   Not safe for concurrent use; evaluation is strictly sequential.
# ============================================================

import math

import numpy as np
from PIL import Image, ImageChops

from .errors import ResourceLoadError, RenderSurfaceError, OutputSaveError

BACKGROUND = (0, 0, 0, 255)     # opaque black
WHITE      = (255, 255, 255, 255)


# ---------------------- Utility / IO ----------------------
def load_image(path):
    try:
        im = Image.open(path).convert("RGBA")
    except (OSError, ValueError) as e:
        raise ResourceLoadError(f"Cannot read image: {path} ({e})") from e
    return np.array(im, dtype=np.uint8)


def save_image(buffer, path):
    try:
        Image.fromarray(np.ascontiguousarray(buffer, dtype=np.uint8)).save(path)
    except (OSError, ValueError) as e:
        raise OutputSaveError(f"Failed to write image: {path} ({e})") from e


def resize_to_fit(image, max_dimension):
    """Uniform rescale so the larger side becomes max_dimension."""
    h, w = image.shape[:2]
    scale = max_dimension / float(max(w, h))
    size = (max(1, int(round(w * scale))), max(1, int(round(h * scale))))
    im = Image.fromarray(image).resize(size, Image.LANCZOS)
    return np.array(im, dtype=np.uint8)


# ---------------------- Stamp geometry ----------------------
def stamp_corners(stamp, tw, th):
    """Canvas-space corners of a stamp's transformed template quad."""
    ox, oy = tw / 2.0, th / 2.0
    rad = math.radians(stamp.rotation)
    c, s = math.cos(rad), math.sin(rad)
    pts = []
    for lx, ly in ((-ox, -oy), (tw - ox, -oy), (tw - ox, th - oy), (-ox, th - oy)):
        lx, ly = lx * stamp.sx, ly * stamp.sy
        pts.append((c * lx - s * ly + stamp.x, s * lx + c * ly + stamp.y))
    return pts


def inverse_affine(stamp, tw, th, x0, y0):
    # PIL AFFINE data: maps output (patch) coords back into template coords
    rad = math.radians(stamp.rotation)
    c, s = math.cos(rad), math.sin(rad)
    qx, qy = x0 - stamp.x, y0 - stamp.y
    return (
        c / stamp.sx, s / stamp.sx, (c * qx + s * qy) / stamp.sx + tw / 2.0,
        -s / stamp.sy, c / stamp.sy, (-s * qx + c * qy) / stamp.sy + th / 2.0,
    )


# ---------------------- Renderer ----------------------
class Renderer:
    def __init__(self, template):
        self.template = Image.fromarray(np.ascontiguousarray(template, dtype=np.uint8)).convert("RGBA")
        self._scratch = None

    @property
    def template_size(self):
        return self.template.size

    def surface(self, width, height):
        if width <= 0 or height <= 0:
            raise RenderSurfaceError(f"Invalid canvas size {width}x{height}")
        if self._scratch is None or self._scratch.size != (width, height):
            try:
                self._scratch = Image.new("RGBA", (width, height), BACKGROUND)
            except (MemoryError, ValueError) as e:
                raise RenderSurfaceError(f"Cannot allocate {width}x{height} canvas") from e
        return self._scratch

    def rasterize(self, genome, width, height):
        canvas = self.surface(width, height)
        canvas.paste(BACKGROUND, (0, 0, width, height))
        for stamp in genome:
            self.draw_stamp(canvas, stamp)
        return np.array(canvas, dtype=np.uint8)

    def draw_stamp(self, canvas, stamp):
        if stamp.a == 0:
            return
        w, h = canvas.size
        tw, th = self.template.size
        pts = stamp_corners(stamp, tw, th)
        xs = [p[0] for p in pts]
        ys = [p[1] for p in pts]
        x0, x1 = max(0, math.floor(min(xs))), min(w, math.ceil(max(xs)))
        y0, y1 = max(0, math.floor(min(ys))), min(h, math.ceil(max(ys)))
        if x0 >= x1 or y0 >= y1:
            return

        patch = self.template.transform(
            (x1 - x0, y1 - y0), Image.AFFINE,
            inverse_affine(stamp, tw, th, x0, y0), resample=Image.BILINEAR)
        if stamp.color != WHITE:
            patch = ImageChops.multiply(patch, Image.new("RGBA", patch.size, stamp.color))
        canvas.alpha_composite(patch, dest=(x0, y0))
