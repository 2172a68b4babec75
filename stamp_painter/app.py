# ============================================================
# STAMP-PAINT: approximate a target image with tinted stamps
# - Loads target + template, hill-climbs one stamp per step
# - Alternates time-boxed bursts with preview frames
# - Saves the final composite when stopped
# ============================================================

import os, sys, time

import numpy as np

from .config import (IMAGE_MAX_DIMENSION, BURST_BUDGET_S, REPORT_EVERY, USAGE,
                     parse_arguments, template_max_dimension)
from .display import Preview, StopFlag, is_headless
from .errors import ResourceLoadError, RenderSurfaceError, OutputSaveError
from .fitness import FitnessEvaluator, image_metrics
from .optimizer import HillClimbOptimizer
from .render import Renderer, load_image, save_image, resize_to_fit

PROG = "stamp-painter"


def setup(config):
    """Load assets and build the evaluator; raises on any startup failure."""
    target = resize_to_fit(load_image(config.input_path), IMAGE_MAX_DIMENSION)
    template = resize_to_fit(load_image(config.sprite_path), template_max_dimension())
    renderer = Renderer(template)
    evaluator = FitnessEvaluator(target, renderer)
    renderer.surface(evaluator.width, evaluator.height)
    return evaluator


def run(optimizer, stop, budget=BURST_BUDGET_S):
    preview = None if is_headless() else Preview(optimizer.evaluator.target, stop)
    if preview is not None:
        preview.show()

    next_report = REPORT_EVERY
    try:
        while not stop.requested:
            optimizer.run_burst(budget)
            if optimizer.improvements >= next_report:
                print(f"[{optimizer.iterations:08d}] err={optimizer.fitness} | accepted={optimizer.improvements}")
                while next_report <= optimizer.improvements:
                    next_report += REPORT_EVERY
            if preview is not None:
                best = optimizer.evaluator.render(optimizer.genome)
                preview.update(best, optimizer.iterations, optimizer.fitness)
                preview.wait_frame()
    finally:
        if preview is not None:
            preview.close()
        stop.restore()


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    parsed = parse_arguments(argv)
    if parsed.show_help:
        print(USAGE.format(prog=PROG))
        return 0
    if parsed.error:
        print(f"error: {parsed.error}", file=sys.stderr)
        print(USAGE.format(prog=PROG), file=sys.stderr)
        return 2

    config = parsed.config
    print("Running with:\n"
          f"  Input: {config.input_path}\n"
          f"  Sprite: {config.sprite_path}\n"
          f"  Output: {config.output_path}\n"
          f"  DNA Length: {config.dna_length}")

    t0 = time.time()
    print("== STAMP-PAINT (Hill Climbing Stamps) start ==")
    try:
        evaluator = setup(config)
    except (ResourceLoadError, RenderSurfaceError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    rng = np.random.default_rng(int.from_bytes(os.urandom(8), "little"))
    optimizer = HillClimbOptimizer(evaluator, rng, dna_length=config.dna_length)
    print(f"Canvas: {evaluator.width}x{evaluator.height} | Init error: {optimizer.fitness}")

    stop = StopFlag().install()
    run(optimizer, stop)

    final = evaluator.render(optimizer.genome)
    try:
        save_image(final, config.output_path)
        print(f"Successfully saved to: {config.output_path}")
    except OutputSaveError as e:
        print(f"Failed to save image: {e}", file=sys.stderr)

    metrics = image_metrics(evaluator.target, final)
    print("\n📈 Final Metrics:")
    print(f"   {'generations':15s}: {optimizer.iterations}")
    print(f"   {'accepted':15s}: {optimizer.improvements}")
    for k, v in metrics.items():
        print(f"   {k:15s}: {v:.6f}" if isinstance(v, float) else f"   {k:15s}: {v}")
    print(f"Done in {time.time()-t0:.1f}s")
    return 0

