# ============================================================
# FITNESS: integer pixel error between render and target
#   err = sum |dR| + |dG| + |dB| + dA^2   (int64 accumulation)
# Lower is better; 0 means a pixel-identical render.
# ============================================================

import warnings

import numpy as np
from skimage.metrics import structural_similarity as ssim
from skimage.metrics import peak_signal_noise_ratio as psnr

from .errors import RenderContractError


def pixel_error(target, generated):
    if target.shape != generated.shape:
        raise RenderContractError(
            f"Rendered buffer {generated.shape} does not match target {target.shape}")
    d = target.astype(np.int64) - generated.astype(np.int64)
    rgb = np.abs(d[..., :3]).sum(dtype=np.int64)
    alpha = (d[..., 3] * d[..., 3]).sum(dtype=np.int64)
    return int(rgb + alpha)


class FitnessEvaluator:
    """Renders genomes at the target's size and scores them."""

    def __init__(self, target, renderer):
        self.target = np.array(target, dtype=np.uint8)
        self.target.setflags(write=False)
        self.renderer = renderer
        self.height, self.width = self.target.shape[:2]

    def render(self, genome):
        return self.renderer.rasterize(genome, self.width, self.height)

    def evaluate(self, genome):
        return pixel_error(self.target, self.render(genome))


# ---------------- METRICS ----------------
def image_metrics(target, generated):
    t = target[..., :3].astype(np.float32) / 255.0
    g = generated[..., :3].astype(np.float32) / 255.0
    # ssim needs an odd window no larger than the image
    win = min(7, *t.shape[:2])
    win -= 1 - win % 2
    ssim_val = float(ssim(t, g, win_size=win, channel_axis=2, data_range=1.0)) if win >= 3 else float("nan")
    with warnings.catch_warnings():
        # identical images: log10 of a zero error gives inf
        warnings.simplefilter("ignore", RuntimeWarning)
        psnr_val = float(psnr(t, g, data_range=1.0))
    return dict(
        error=pixel_error(target, generated),
        psnr=psnr_val,
        ssim=ssim_val,
    )
