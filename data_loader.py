from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List

import pandas as pd

from config import COUNT_FIELDS, REQUIRED_COLUMNS, SMOOTHING_WINDOW_DAYS

logger = logging.getLogger(__name__)


@dataclass
class Feature:
    """A map feature as the framework hands it to modules.

    ``properties`` mirrors the GeoJSON properties block (``ABBREV``, ``NAME``);
    ``series`` holds the daily counts indexed by date.
    """

    properties: Dict[str, Any]
    series: pd.DataFrame = field(repr=False)

    @property
    def abbrev(self) -> str:
        return self.properties.get("ABBREV", "")


def _parse_dates(raw: pd.Series) -> pd.Series:
    text = raw.astype(str).str.strip()
    compact = text.str.fullmatch(r"\d{8}")
    parsed = pd.Series(pd.NaT, index=raw.index, dtype="datetime64[ns]")
    if compact.any():
        parsed.loc[compact] = pd.to_datetime(text[compact], format="%Y%m%d", errors="coerce")
    if (~compact).any():
        parsed.loc[~compact] = pd.to_datetime(text[~compact], errors="coerce")
    return parsed.dt.normalize()


def load_dataframe(data_path: Path) -> pd.DataFrame:
    data_path = Path(data_path)
    if data_path.suffix == ".parquet":
        df = pd.read_parquet(data_path)
    else:
        df = pd.read_csv(data_path)
    return prepare_dataframe(df)


def prepare_dataframe(df: pd.DataFrame) -> pd.DataFrame:
    missing = REQUIRED_COLUMNS - set(df.columns)
    if missing:
        raise ValueError(f"Data missing expected columns: {sorted(missing)}")

    df = df.copy()
    df["date"] = _parse_dates(df["date"])
    bad = df["date"].isna()
    if bad.any():
        raise ValueError(f"{int(bad.sum())} rows have unparseable dates")

    df["state"] = df["state"].astype(str).str.upper()
    for col in COUNT_FIELDS:
        df[col] = pd.to_numeric(df[col], errors="coerce").fillna(0.0)

    df = df.sort_values(["state", "date"]).reset_index(drop=True)
    logger.info("Loaded %d records for %d states", len(df), df["state"].nunique())
    return df


def build_features(df: pd.DataFrame) -> Dict[str, Feature]:
    features = {}
    for state, rows in df.groupby("state", sort=True):
        series = (
            rows.drop_duplicates("date", keep="last")
            .set_index("date")[COUNT_FIELDS]
            .sort_index()
        )
        properties = {"ABBREV": state}
        if "name" in rows.columns:
            properties["NAME"] = rows["name"].iloc[0]
        features[state] = Feature(properties=properties, series=series)
    return features


def get_value(feature: Feature, date, field: str, smoothed: bool = True) -> float:
    """Value of ``field`` for ``feature`` on ``date``.

    Smoothed values are the trailing mean over ``SMOOTHING_WINDOW_DAYS``
    days ending at ``date``. Days without a record count as 0, both on
    their own and inside the window.
    """
    if field not in feature.series.columns:
        raise KeyError(f"Feature {feature.abbrev!r} has no field {field!r}")

    day = pd.Timestamp(date).normalize()
    column = feature.series[field]
    if not smoothed:
        return float(column.loc[day]) if day in column.index else 0.0

    window = pd.date_range(end=day, periods=SMOOTHING_WINDOW_DAYS, freq="D")
    return float(column.reindex(window, fill_value=0).mean())


def date_options(df: pd.DataFrame) -> List[Dict[str, Any]]:
    dates = sorted(df["date"].drop_duplicates())
    return [{"label": d.strftime("%Y-%m-%d"), "value": d.strftime("%Y-%m-%d")} for d in dates]


def latest_date(df: pd.DataFrame) -> pd.Timestamp:
    return df["date"].max()
