#!/usr/bin/env python3

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import pandas as pd

from config import APP_TITLE, DEF_DATA, LOG_LEVEL
from data_loader import build_features, get_value, latest_date, load_dataframe
from modules import get_module
from modules.base_module import MapModule
from utils import legend_bucket

logger = logging.getLogger(__name__)

TABLE_COLUMNS = ["state", "tests", "positive", "ratio", "color", "legend_bucket"]


def build_ratio_table(df: pd.DataFrame, module: MapModule, date) -> pd.DataFrame:
    features = build_features(df)
    rows = []
    for state, feature in features.items():
        positive = get_value(feature, date, "positive", smoothed=False)
        tests = positive + get_value(feature, date, "negative", smoothed=False)
        ratio = module.value_fcn(feature, date)
        cells, labels = module.cells_and_labels_fcn(feature, date)
        rows.append({
            "state": state,
            "tests": int(round(tests)),
            "positive": int(round(positive)),
            "ratio": ratio,
            "color": module.color(ratio),
            "legend_bucket": legend_bucket(ratio, cells, labels),
        })
    return pd.DataFrame(rows, columns=TABLE_COLUMNS).sort_values("state").reset_index(drop=True)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description=f"{APP_TITLE}: per-state values and map colors for one date")
    parser.add_argument(
        "--data",
        type=str,
        default=str(DEF_DATA),
        help="CSV or Parquet file of daily state records",
    )
    parser.add_argument("--date", type=str, default=None, help="Date (YYYY-MM-DD); defaults to the latest")
    parser.add_argument("--output", type=str, default=None, help="Write the table to this CSV instead of stdout")
    parser.add_argument("--module", type=str, default="Test-Case Ratio", help="Variable to evaluate")
    args = parser.parse_args(argv)

    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    data_path = Path(args.data)
    if not data_path.exists():
        logger.error("Data file not found: %s", data_path)
        return 1

    try:
        module = get_module(args.module)
    except KeyError as e:
        parser.error(str(e))

    df = load_dataframe(data_path)
    if args.date is None:
        date = latest_date(df)
    else:
        try:
            date = pd.Timestamp(args.date).normalize()
        except ValueError:
            parser.error(f"Invalid date: {args.date}")
        if date not in set(df["date"]):
            parser.error(f"No records for {date:%Y-%m-%d}")

    logger.info("Evaluating %s for %s", module.variable_name, f"{date:%Y-%m-%d}")
    table = build_ratio_table(df, module, date)

    if args.output:
        output_path = Path(args.output)
        table.to_csv(output_path, index=False)
        logger.info("Wrote %d rows to %s", len(table), output_path)
    else:
        table.to_csv(sys.stdout, index=False)
    return 0


if __name__ == "__main__":
    sys.exit(main())
