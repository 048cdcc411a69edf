import pandas as pd
import pytest

from data_loader import Feature, build_features, prepare_dataframe


def make_feature(abbrev, rows):
    """Feature from ``(date, positive, negative)`` tuples."""
    series = pd.DataFrame(rows, columns=["date", "positive", "negative"])
    series["date"] = pd.to_datetime(series["date"])
    return Feature(properties={"ABBREV": abbrev}, series=series.set_index("date"))


@pytest.fixture
def raw_records():
    return pd.DataFrame(
        {
            "date": [20200401, 20200402, 20200401, 20200402, 20200401, 20200402],
            "state": ["ny", "ny", "vt", "vt", "wy", "wy"],
            "name": ["New York", "New York", "Vermont", "Vermont", "Wyoming", "Wyoming"],
            "positive": [1000, 3000, 10, 30, 0, 0],
            "negative": [9000, 7000, 90, 70, 0, 50],
        }
    )


@pytest.fixture
def records(raw_records):
    return prepare_dataframe(raw_records)


@pytest.fixture
def features(records):
    return build_features(records)


@pytest.fixture
def feature_factory():
    return make_feature
