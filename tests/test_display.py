import signal

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.backend_bases import CloseEvent

from stamp_painter.display import Preview, StopFlag, is_headless

from tests.conftest import gradient_target


def test_agg_is_headless():
    assert is_headless()


def test_stop_flag_request(capsys):
    stop = StopFlag()
    assert not stop.requested
    stop.request()
    stop.request()
    assert stop.requested
    assert capsys.readouterr().out.count("Stop signal received") == 1


def test_preview_updates_stats():
    target = gradient_target(16, 16)
    preview = Preview(target, StopFlag())
    try:
        buf = np.zeros_like(target)
        preview.update(buf, 42, 1234)
        assert preview.stats.get_text() == "Generation: 42\nError: 1234"
        assert np.array_equal(np.asarray(preview.result.get_array()), buf)
    finally:
        preview.close()
    assert not plt.get_fignums()


def test_install_routes_sigint_and_sigterm():
    previous = {s: signal.getsignal(s) for s in (signal.SIGINT, signal.SIGTERM)}
    for sig in previous:
        stop = StopFlag().install()
        try:
            signal.raise_signal(sig)
            assert stop.requested
        finally:
            stop.restore()
        assert signal.getsignal(sig) == previous[sig]


def test_closing_preview_requests_stop():
    stop = StopFlag()
    preview = Preview(gradient_target(8, 8), stop)
    try:
        canvas = preview.fig.canvas
        canvas.callbacks.process("close_event", CloseEvent("close_event", canvas))
        assert stop.requested
    finally:
        preview.close()
