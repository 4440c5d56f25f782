"""Load election entities from tabular data."""

import logging
from pathlib import Path

import pandas as pd

from probsim.errors import InvalidParameter
from probsim.models import Entity

logger = logging.getLogger(__name__)


def read_table(source: str | Path | pd.DataFrame) -> pd.DataFrame:
    """Return ``source`` as a DataFrame, reading it from CSV if needed."""
    if isinstance(source, pd.DataFrame):
        return source
    path = Path(source)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")
    return pd.read_csv(path)


def _require_columns(df: pd.DataFrame, columns: list[str], table: str) -> None:
    missing = [c for c in columns if c not in df.columns]
    if missing:
        raise InvalidParameter(f"{table} table is missing column(s): {', '.join(missing)}")


def load_entities(
    weights: str | Path | pd.DataFrame,
    probabilities: str | Path | pd.DataFrame | None = None,
    key: str = "state",
    weight_column: str = "electoral_votes",
    probability_column: str = "probability",
) -> list[Entity]:
    """Build typed entities from a weight table and a probability table.

    Args:
        weights: Table (or CSV path) with ``key`` and ``weight_column``
        probabilities: Optional second table with ``key`` and
            ``probability_column``; when omitted the probability column is
            read from ``weights``
        key: Join key and entity name column
        weight_column: Column holding each entity's weight
        probability_column: Column holding each entity's win probability

    Returns:
        One Entity per row, in the order of the weight table
    """
    weights_df = read_table(weights)
    _require_columns(weights_df, [key, weight_column], "weights")

    if probabilities is None:
        _require_columns(weights_df, [probability_column], "weights")
        df = weights_df[[key, weight_column, probability_column]]
    else:
        probs_df = read_table(probabilities)
        _require_columns(probs_df, [key, probability_column], "probabilities")

        unmatched = set(weights_df[key]) ^ set(probs_df[key])
        if unmatched:
            raise InvalidParameter(
                f"Keys present in only one table: {', '.join(sorted(map(str, unmatched)))}"
            )
        try:
            df = weights_df[[key, weight_column]].merge(
                probs_df[[key, probability_column]],
                on=key,
                how="left",
                validate="one_to_one",
            )
        except pd.errors.MergeError as exc:
            raise InvalidParameter(f"Duplicate '{key}' values: {exc}") from exc

    if df[key].duplicated().any():
        raise InvalidParameter(f"Duplicate '{key}' values in weights table")
    if df[[weight_column, probability_column]].isna().any().any():
        raise InvalidParameter("Weights and probabilities must not be missing")

    entities = []
    for row in df.itertuples(index=False):
        name, weight, probability = row
        try:
            whole = float(weight) == int(weight)
            probability = float(probability)
        except (TypeError, ValueError, OverflowError):
            raise InvalidParameter(
                f"Weight and probability for '{name}' must be numbers, got {weight!r}, {probability!r}"
            ) from None
        if not whole:
            raise InvalidParameter(f"Weight for '{name}' must be a whole number, got {weight}")
        entities.append(
            Entity(name=str(name), weight=int(weight), probability=probability)
        )

    logger.info("Loaded %d entities (total weight %d)", len(entities), sum(e.weight for e in entities))
    return entities
