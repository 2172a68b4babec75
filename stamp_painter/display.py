# ============================================================
# DISPLAY: live preview (matplotlib) + stop signal
# - Target on the left, current best on the right, stats on top
# - Closing the window, Ctrl+C or SIGTERM requests a stop; the
#   request is only looked at between bursts
# ============================================================

import signal

import matplotlib.pyplot as plt
from matplotlib.backends import BackendFilter, backend_registry

from .config import WINDOW_W, WINDOW_H, SCALING

DPI = 100


def is_headless():
    return plt.get_backend().lower() in backend_registry.list_builtin(BackendFilter.NON_INTERACTIVE)


class StopFlag:
    def __init__(self):
        self.requested = False
        self._previous = {}

    def request(self, signum=None, frame=None):
        if not self.requested:
            print("\n🛑 Stop signal received, finishing current burst...")
        self.requested = True

    def install(self):
        for sig in (signal.SIGINT, signal.SIGTERM):
            self._previous[sig] = signal.signal(sig, self.request)
        return self

    def restore(self):
        for sig, handler in self._previous.items():
            signal.signal(sig, signal.SIG_DFL if handler is None else handler)
        self._previous.clear()


def _panel_rect(cx, img_w, img_h):
    # axes rect (figure fraction) for an image magnified SCALING times, centred at (cx, H/2)
    w, h = img_w * SCALING, img_h * SCALING
    return [(cx - w / 2) / WINDOW_W, (WINDOW_H - h) / 2 / WINDOW_H, w / WINDOW_W, h / WINDOW_H]


class Preview:
    def __init__(self, target, stop):
        h, w = target.shape[:2]
        self.fig = plt.figure(figsize=(WINDOW_W / DPI, WINDOW_H / DPI), dpi=DPI, facecolor="black")
        if self.fig.canvas.manager is not None:
            self.fig.canvas.manager.set_window_title("Genetic Photo Recreation")

        ax_t = self.fig.add_axes(_panel_rect(WINDOW_W / 4, w, h))
        ax_r = self.fig.add_axes(_panel_rect(3 * WINDOW_W / 4, w, h))
        for ax in (ax_t, ax_r):
            ax.axis("off")
        ax_t.imshow(target, interpolation="bilinear")
        self.result = ax_r.imshow(target * 0, interpolation="bilinear")
        self.stats = self.fig.text(10 / WINDOW_W, 1 - 10 / WINDOW_H, "", color="white",
                                   fontsize=16, va="top", ha="left")
        self.fig.canvas.mpl_connect("close_event", lambda evt: stop.request())

    def update(self, buffer, iterations, fitness):
        self.result.set_data(buffer)
        self.stats.set_text(f"Generation: {iterations}\nError: {fitness}")
        self.fig.canvas.draw_idle()

    def show(self):
        plt.show(block=False)

    def wait_frame(self, interval=0.001):
        plt.pause(interval)

    def close(self):
        plt.close(self.fig)
