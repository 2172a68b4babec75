# ============================================================
# GENOME: stamps, genomes and scored candidates
# A genome is a tuple of Stamps drawn back-to-front.
# Stamps are frozen; a trial genome is a fresh tuple that shares
# every untouched Stamp with its parent.
# ============================================================

from dataclasses import dataclass
from typing import NamedTuple, Tuple

# ---------------------- Stamp bounds ----------------------
SCALE_MIN, SCALE_MAX = 0.1, 5.0
CHANNEL_MAX          = 255
ALPHA_CAP            = 220
DEFAULT_TINT         = (255, 255, 255, 255)


@dataclass(frozen=True)
class Stamp:
    x: float
    y: float
    rotation: float = 0.0          # degrees, not wrapped
    sx: float = 1.0
    sy: float = 1.0
    r: int = DEFAULT_TINT[0]
    g: int = DEFAULT_TINT[1]
    b: int = DEFAULT_TINT[2]
    a: int = DEFAULT_TINT[3]

    @property
    def position(self): return (self.x, self.y)

    @property
    def scale(self): return (self.sx, self.sy)

    @property
    def color(self): return (self.r, self.g, self.b, self.a)


Genome = Tuple[Stamp, ...]


class Candidate(NamedTuple):
    genome: Genome
    fitness: int


# ---------------------- Construction ----------------------
def random_genome(dna_length, width, height, rng):
    """Random positions and rotations, default scale and tint."""
    stamps = []
    for _ in range(dna_length):
        x = float(rng.integers(0, width, endpoint=True))
        y = float(rng.integers(0, height, endpoint=True))
        rot = float(rng.uniform(0.0, 360.0))
        stamps.append(Stamp(x, y, rot))
    return tuple(stamps)


def replace_stamp(genome, index, stamp):
    trial = list(genome)
    trial[index] = stamp
    return tuple(trial)
