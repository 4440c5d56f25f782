"""Sampling and Monte Carlo simulation components."""

from .birthday import BirthdayResults, BirthdayTrial, simulate_birthday
from .election import ElectionResults, ElectionTrial, simulate_election
from .runner import TrialRunner, run_trials
from .sampler import (
    as_generator,
    sample,
    sample_bernoulli,
    sample_binomial,
    sample_discrete_uniform,
)

__all__ = [
    "BirthdayResults",
    "BirthdayTrial",
    "ElectionResults",
    "ElectionTrial",
    "TrialRunner",
    "as_generator",
    "run_trials",
    "sample",
    "sample_bernoulli",
    "sample_binomial",
    "sample_discrete_uniform",
    "simulate_birthday",
    "simulate_election",
]
