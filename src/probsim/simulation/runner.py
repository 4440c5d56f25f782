"""Monte Carlo trial runner."""

import logging
import os
from collections.abc import Callable
from concurrent.futures import ProcessPoolExecutor
from typing import Any

import numpy as np

from probsim.config import SimulationConfig
from probsim.errors import InvalidParameter
from probsim.validation import check_count

logger = logging.getLogger(__name__)

TrialFunction = Callable[[int, np.random.Generator], Any]


def _run_single_trial(args: tuple) -> Any:
    """Run one trial (for multiprocessing).

    Args:
        args: Tuple of (trial_function, index, seed_sequence)

    Returns:
        The trial result
    """
    trial_function, index, seed_sequence = args
    rng = np.random.default_rng(seed_sequence)
    return trial_function(index, rng)


class TrialRunner:
    """Runs a trial function many times with independent random streams."""

    def __init__(self, seed: int | None = None):
        """Initialize the runner.

        Args:
            seed: Master seed; None draws fresh entropy (logged so the run
                can be repeated)
        """
        if seed is not None:
            check_count("seed", seed)
        self.seed_sequence = np.random.SeedSequence(seed)
        self.seed = self.seed_sequence.entropy

    @classmethod
    def from_config(cls, config: SimulationConfig) -> "TrialRunner":
        return cls(seed=config.seed)

    def spawn_seeds(self, trial_count: int) -> list[np.random.SeedSequence]:
        """One child seed per trial, identical for every run with this seed."""
        return np.random.SeedSequence(self.seed).spawn(trial_count)

    def run(
        self,
        trial_count: int,
        trial_function: TrialFunction,
        parallel: bool = False,
        max_workers: int | None = None,
    ) -> list[Any]:
        """Run ``trial_count`` independent trials.

        Args:
            trial_count: Number of trials to run
            trial_function: Called as ``trial_function(index, rng)``; must be
                picklable when ``parallel`` is set
            parallel: Whether to use a process pool
            max_workers: Maximum parallel workers (None = CPU count)

        Returns:
            Trial results ordered by trial index
        """
        trial_count = check_count("trial_count", trial_count)
        if not callable(trial_function):
            raise InvalidParameter(f"trial_function must be callable, got {trial_function!r}")
        if max_workers is not None and max_workers < 1:
            raise InvalidParameter(f"max_workers must be positive, got {max_workers}")

        logger.info(
            "Running %d trials of %s (seed=%d, parallel=%s)",
            trial_count,
            getattr(trial_function, "__name__", type(trial_function).__name__),
            self.seed,
            parallel,
        )

        args_list = [
            (trial_function, index, seed_sequence)
            for index, seed_sequence in enumerate(self.spawn_seeds(trial_count))
        ]

        if parallel and trial_count > 1:
            workers = max_workers or os.cpu_count() or 1
            chunksize = max(1, trial_count // (workers * 4))
            with ProcessPoolExecutor(max_workers=max_workers) as executor:
                results = list(executor.map(_run_single_trial, args_list, chunksize=chunksize))
        else:
            results = [_run_single_trial(args) for args in args_list]

        logger.debug("Finished %d trials", len(results))
        return results

    def run_config(self, config: SimulationConfig, trial_function: TrialFunction) -> list[Any]:
        """Run trials with the counts and pool settings of ``config``."""
        return self.run(
            config.num_trials,
            trial_function,
            parallel=config.parallel,
            max_workers=config.max_workers,
        )


def run_trials(
    trial_count: int,
    trial_function: TrialFunction,
    seed: int | None = None,
    parallel: bool = False,
    max_workers: int | None = None,
) -> list[Any]:
    """Run ``trial_count`` trials with a fresh :class:`TrialRunner`."""
    return TrialRunner(seed=seed).run(
        trial_count,
        trial_function,
        parallel=parallel,
        max_workers=max_workers,
    )
