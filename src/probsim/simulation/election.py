"""Election simulation: weighted entities won by repeated Bernoulli draws."""

import logging
from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass, field

import numpy as np

from probsim.analysis.aggregate import AggregateStatistics, aggregate
from probsim.config import DEFAULT_DRAWS, DEFAULT_NUM_TRIALS
from probsim.errors import InvalidParameter
from probsim.models import Entity
from probsim.simulation.runner import TrialRunner
from probsim.simulation.sampler import sample_binomial
from probsim.validation import check_count

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ElectionTrial:
    """One simulated election.

    Each entity gets ``draws`` Bernoulli draws at its own probability; the
    entity is won when the success count is strictly greater than
    ``threshold`` (half of ``draws`` unless given). The trial result is the
    total weight of the won entities.
    """

    entities: tuple[Entity, ...]
    draws: int = DEFAULT_DRAWS
    threshold: float | None = None

    def __post_init__(self):
        object.__setattr__(self, "entities", tuple(self.entities))
        check_count("draws", self.draws)
        if self.threshold is not None and not 0 <= self.threshold <= self.draws:
            raise InvalidParameter(
                f"threshold must lie in [0, {self.draws}], got {self.threshold}"
            )
        for entity in self.entities:
            if not isinstance(entity, Entity):
                raise InvalidParameter(f"Expected Entity, got {entity!r}")

    @property
    def decision_threshold(self) -> float:
        return self.draws / 2 if self.threshold is None else self.threshold

    def outcomes(self, rng: np.random.Generator) -> np.ndarray:
        """Boolean win flag per entity for one trial."""
        threshold = self.decision_threshold
        return np.array(
            [
                sample_binomial(1, self.draws, entity.probability, rng)[0] > threshold
                for entity in self.entities
            ],
            dtype=bool,
        )

    def __call__(self, index: int, rng: np.random.Generator) -> int:
        won = self.outcomes(rng)
        return sum(entity.weight for entity, w in zip(self.entities, won) if w)


@dataclass
class ElectionResults:
    """Results from a batch of election trials."""

    num_trials: int
    total_weight: int
    votes: list[int]
    entity_wins: dict[str, int] = field(default_factory=dict)

    @property
    def statistics(self) -> AggregateStatistics:
        return aggregate(self.votes)

    @property
    def win_probability(self) -> float:
        """Share of trials with strictly more than half of the total weight."""
        if not self.votes:
            return 0.0
        return sum(1 for v in self.votes if 2 * v > self.total_weight) / len(self.votes)

    @property
    def tie_probability(self) -> float:
        """Share of trials with exactly half of the total weight."""
        if not self.votes:
            return 0.0
        return sum(1 for v in self.votes if 2 * v == self.total_weight) / len(self.votes)

    @property
    def entity_win_rates(self) -> dict[str, float]:
        """Share of trials in which each entity was won."""
        if not self.num_trials:
            return {}
        return {
            name: wins / self.num_trials
            for name, wins in sorted(
                self.entity_wins.items(),
                key=lambda x: x[1],
                reverse=True,
            )
        }

    def get_vote_distribution(self) -> dict[int, float]:
        """Probability of each vote total."""
        if not self.votes:
            return {}

        counts: dict[int, int] = defaultdict(int)
        for v in self.votes:
            counts[v] += 1

        return {
            votes: count / len(self.votes)
            for votes, count in sorted(counts.items())
        }


@dataclass(frozen=True)
class _TrialRecord:
    votes: int
    won: tuple[bool, ...]


@dataclass(frozen=True)
class _RecordingElectionTrial:
    """Election trial that also reports which entities were won."""

    trial: ElectionTrial

    def __call__(self, index: int, rng: np.random.Generator) -> _TrialRecord:
        won = self.trial.outcomes(rng)
        votes = sum(entity.weight for entity, w in zip(self.trial.entities, won) if w)
        return _TrialRecord(votes=votes, won=tuple(bool(w) for w in won))


def simulate_election(
    entities: Iterable[Entity],
    num_trials: int = DEFAULT_NUM_TRIALS,
    draws: int = DEFAULT_DRAWS,
    threshold: float | None = None,
    seed: int | None = None,
    parallel: bool = False,
    max_workers: int | None = None,
) -> ElectionResults:
    """Run repeated election trials and collect vote totals.

    Args:
        entities: Weighted entities with win probabilities
        num_trials: Number of simulated elections
        draws: Bernoulli draws per entity in each election
        threshold: Success count an entity must exceed (default draws / 2)
        seed: Master seed for reproducibility
        parallel: Whether to use parallel processing
        max_workers: Maximum parallel workers (None = CPU count)

    Returns:
        ElectionResults with one vote total per trial
    """
    trial = ElectionTrial(entities=tuple(entities), draws=draws, threshold=threshold)
    names = [entity.name for entity in trial.entities]
    if len(set(names)) != len(names):
        raise InvalidParameter("Entity names must be unique")

    runner = TrialRunner(seed=seed)
    records = runner.run(
        num_trials,
        _RecordingElectionTrial(trial),
        parallel=parallel,
        max_workers=max_workers,
    )

    entity_wins = dict.fromkeys(names, 0)
    for record in records:
        for name, won in zip(names, record.won):
            if won:
                entity_wins[name] += 1

    results = ElectionResults(
        num_trials=num_trials,
        total_weight=sum(entity.weight for entity in trial.entities),
        votes=[record.votes for record in records],
        entity_wins=entity_wins,
    )
    logger.info(
        "Election over %d entities: win probability %.3f after %d trials",
        len(names),
        results.win_probability,
        num_trials,
    )
    return results
