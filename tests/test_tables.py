"""Tests for loading entities from tables."""

from pathlib import Path

import pandas as pd
import pytest

from probsim.data import load_entities, read_table
from probsim.errors import InvalidParameter
from probsim.models import Entity

EXAMPLE_DATA = Path(__file__).parent.parent / "examples" / "data"


@pytest.fixture
def weights_df():
    return pd.DataFrame({"state": ["Ohio", "Iowa", "Utah"], "electoral_votes": [18, 6, 6]})


@pytest.fixture
def probs_df():
    return pd.DataFrame({"state": ["Utah", "Ohio", "Iowa"], "probability": [0.37, 0.46, 0.47]})


class TestReadTable:
    def test_dataframe_passthrough(self, weights_df):
        assert read_table(weights_df) is weights_df

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="File not found"):
            read_table(tmp_path / "nope.csv")


class TestLoadEntities:
    def test_join_on_key(self, weights_df, probs_df):
        entities = load_entities(weights_df, probs_df, key="state")
        assert [e.name for e in entities] == ["Ohio", "Iowa", "Utah"]
        assert entities[0] == Entity(name="Ohio", weight=18, probability=0.46)
        assert entities[2].probability == pytest.approx(0.37)

    def test_single_table(self, weights_df):
        df = weights_df.assign(probability=[0.5, 0.4, 0.3])
        entities = load_entities(df)
        assert [e.weight for e in entities] == [18, 6, 6]

    def test_csv_paths(self, tmp_path, weights_df, probs_df):
        weights_path = tmp_path / "weights.csv"
        probs_path = tmp_path / "probs.csv"
        weights_df.to_csv(weights_path, index=False)
        probs_df.to_csv(probs_path, index=False)
        entities = load_entities(weights_path, probs_path)
        assert len(entities) == 3

    def test_custom_columns(self):
        df = pd.DataFrame({"district": ["D1"], "seats": [2], "p_win": [0.6]})
        entities = load_entities(df, key="district", weight_column="seats", probability_column="p_win")
        assert entities == [Entity(name="D1", weight=2, probability=0.6)]

    def test_unmatched_keys(self, weights_df, probs_df):
        with pytest.raises(InvalidParameter, match="only one table"):
            load_entities(weights_df, probs_df.iloc[:2])

    def test_duplicate_keys(self, weights_df, probs_df):
        doubled = pd.concat([probs_df, probs_df.iloc[:1]])
        with pytest.raises(InvalidParameter, match="Duplicate"):
            load_entities(weights_df, doubled)

    def test_missing_column(self, weights_df):
        with pytest.raises(InvalidParameter, match="missing column"):
            load_entities(weights_df)

    def test_missing_values(self, weights_df):
        df = weights_df.assign(probability=[0.5, None, 0.3])
        with pytest.raises(InvalidParameter, match="missing"):
            load_entities(df)

    def test_bad_probability(self, weights_df):
        df = weights_df.assign(probability=[0.5, 1.4, 0.3])
        with pytest.raises(InvalidParameter):
            load_entities(df)

    def test_fractional_weight(self):
        df = pd.DataFrame({"state": ["X"], "electoral_votes": [2.5], "probability": [0.5]})
        with pytest.raises(InvalidParameter, match="whole number"):
            load_entities(df)

    @pytest.mark.parametrize("weight", ["many", float("inf")])
    def test_non_numeric_weight(self, weight):
        df = pd.DataFrame({"state": ["X"], "electoral_votes": [weight], "probability": [0.5]})
        with pytest.raises(InvalidParameter, match="must be numbers"):
            load_entities(df)

    def test_non_numeric_probability(self):
        df = pd.DataFrame({"state": ["X"], "electoral_votes": [3], "probability": ["likely"]})
        with pytest.raises(InvalidParameter, match="must be numbers"):
            load_entities(df)

    def test_example_data(self):
        entities = load_entities(
            EXAMPLE_DATA / "electoral_votes.csv",
            EXAMPLE_DATA / "state_probabilities.csv",
        )
        assert len(entities) == 51
        assert sum(e.weight for e in entities) == 538
