"""Hill-climbing image approximation with tinted template stamps."""
from .genome import Stamp, Candidate, random_genome, replace_stamp
from .mutation import mutate
from .render import Renderer, load_image, save_image, resize_to_fit
from .fitness import FitnessEvaluator, pixel_error
from .optimizer import HillClimbOptimizer

__all__ = [
    "Stamp", "Candidate", "random_genome", "replace_stamp",
    "mutate",
    "Renderer", "load_image", "save_image", "resize_to_fit",
    "FitnessEvaluator", "pixel_error",
    "HillClimbOptimizer",
]
