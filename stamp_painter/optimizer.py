# ============================================================
# HILL-CLIMB: single-parent, strict-descent search
#   clone -> mutate one stamp -> render -> score -> keep if better
# Bursts run steps until a wall-clock budget is used up; a step
# in flight always finishes.
# ============================================================

import time

from .config import BURST_BUDGET_S
from .genome import Candidate, random_genome, replace_stamp
from .mutation import mutate


class HillClimbOptimizer:
    def __init__(self, evaluator, rng, dna_length=None, genome=None):
        if genome is None:
            genome = random_genome(dna_length or 0, evaluator.width, evaluator.height, rng)
        self.evaluator = evaluator
        self.rng = rng
        self.dna_length = len(genome)
        self.current = Candidate(genome, evaluator.evaluate(genome))
        self.iterations = 0
        self.improvements = 0

    @property
    def genome(self): return self.current.genome

    @property
    def fitness(self): return self.current.fitness

    def step(self):
        """One mutate/evaluate/accept cycle. Returns True if accepted."""
        self.iterations += 1
        if self.dna_length == 0:
            return False

        parent = self.current
        idx = int(self.rng.integers(0, self.dna_length))
        child = mutate(parent.genome[idx], self.evaluator.width, self.evaluator.height, self.rng)
        trial = replace_stamp(parent.genome, idx, child)
        trial_fitness = self.evaluator.evaluate(trial)

        if trial_fitness < parent.fitness:
            self.current = Candidate(trial, trial_fitness)
            self.improvements += 1
            return True
        return False

    def run_burst(self, budget=BURST_BUDGET_S, clock=time.perf_counter):
        start = clock()
        steps = 0
        while clock() - start < budget:
            self.step()
            steps += 1
        return steps
