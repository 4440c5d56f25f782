"""Birthday-problem simulation."""

import logging
from dataclasses import dataclass

import numpy as np

from probsim.analysis.aggregate import AggregateStatistics, aggregate
from probsim.analysis.functions import birthday_collision_probability
from probsim.config import DAYS_IN_YEAR, DEFAULT_GROUP_SIZE, DEFAULT_NUM_TRIALS
from probsim.errors import InvalidParameter
from probsim.simulation.runner import TrialRunner
from probsim.simulation.sampler import sample_discrete_uniform
from probsim.validation import check_count

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BirthdayTrial:
    """Draw ``group_size`` birthdays; 1 if any two coincide, else 0."""

    group_size: int = DEFAULT_GROUP_SIZE
    days: int = DAYS_IN_YEAR

    def __post_init__(self):
        check_count("group_size", self.group_size)
        if check_count("days", self.days) == 0:
            raise InvalidParameter("days must be positive")

    def __call__(self, index: int, rng: np.random.Generator) -> int:
        birthdays = sample_discrete_uniform(self.group_size, 1, self.days, rng)
        return int(len(np.unique(birthdays)) < self.group_size)


@dataclass
class BirthdayResults:
    """Simulated versus exact collision probability."""

    group_size: int
    days: int
    collisions: list[int]

    @property
    def num_trials(self) -> int:
        return len(self.collisions)

    @property
    def collision_rate(self) -> float:
        return sum(self.collisions) / len(self.collisions) if self.collisions else 0.0

    @property
    def exact_probability(self) -> float:
        return birthday_collision_probability(self.group_size, self.days)

    @property
    def statistics(self) -> AggregateStatistics:
        return aggregate(self.collisions)


def simulate_birthday(
    group_size: int = DEFAULT_GROUP_SIZE,
    num_trials: int = DEFAULT_NUM_TRIALS,
    days: int = DAYS_IN_YEAR,
    seed: int | None = None,
    parallel: bool = False,
    max_workers: int | None = None,
) -> BirthdayResults:
    """Estimate the chance of a shared birthday by repeated sampling."""
    trial = BirthdayTrial(group_size=group_size, days=days)
    collisions = TrialRunner(seed=seed).run(
        num_trials,
        trial,
        parallel=parallel,
        max_workers=max_workers,
    )
    results = BirthdayResults(group_size=group_size, days=days, collisions=collisions)
    logger.info(
        "Birthday problem (n=%d, days=%d): simulated %.4f, exact %.4f",
        group_size,
        days,
        results.collision_rate,
        results.exact_probability,
    )
    return results
