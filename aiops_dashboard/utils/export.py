"""
Review table and export helpers.

Builds the pandas tables shown in the dashboard and writes CSV snapshots
of a filtered review set for the CLI.
"""

import json
import logging
import os
from datetime import datetime
from typing import Iterable, Optional

import pandas as pd

from aiops_dashboard.models.review import ASPECT_ORDER, ReviewRecord
from aiops_dashboard.models.summary import FilterResult

logger = logging.getLogger(__name__)

EXPORT_COLUMNS = [
    "id",
    "source",
    "overall_sentiment",
    "original_complaint",
    "detected_language",
    "created_ts",
] + [key.value for key in ASPECT_ORDER]

TABLE_COLUMNS = {
    "source": "Source",
    "original_complaint": "Text",
    "overall_sentiment": "Sentiment",
    "detected_language": "Lang",
}


def reviews_to_dataframe(reviews: Iterable[ReviewRecord]) -> pd.DataFrame:
    """One row per review, all wire fields, input order kept."""
    rows = [r.to_dict() for r in reviews]
    return pd.DataFrame(rows, columns=EXPORT_COLUMNS)


def review_table(reviews: Iterable[ReviewRecord]) -> pd.DataFrame:
    """Display table: Source, Text, Sentiment, Lang."""
    df = reviews_to_dataframe(reviews)
    return df[list(TABLE_COLUMNS)].rename(columns=TABLE_COLUMNS).reset_index(drop=True)


def aspect_table(result: FilterResult) -> pd.DataFrame:
    """Per-aspect breakdown for the filtered set."""
    rows = [
        {
            "Aspect": stats.label,
            "Mentions": stats.total_mentioned,
            "Negative": stats.negative,
            "Positive": stats.positive,
            "Neutral": stats.neutral,
        }
        for stats in result.summary.aspects
    ]
    return pd.DataFrame(rows, columns=["Aspect", "Mentions", "Negative", "Positive", "Neutral"])


def export_filtered_reviews(
    result: FilterResult,
    output_dir: str,
    generated_at: Optional[datetime] = None
) -> str:
    """
    Save the filtered reviews as CSV with a metadata JSON next to it.

    Args:
        result: Filter result to export
        output_dir: Directory to write into (created if missing)
        generated_at: Timestamp used in file names (defaults to now)

    Returns:
        Path to the generated CSV file
    """
    generated_at = generated_at or datetime.now()
    stamp = generated_at.strftime("%Y%m%d_%H%M%S")

    os.makedirs(output_dir, exist_ok=True)
    output_path = os.path.join(output_dir, f"reviews_{stamp}.csv")

    df = reviews_to_dataframe(result.reviews)
    df.to_csv(output_path, index=False)
    logger.info(f"Exported {len(df)} reviews to {output_path}")

    metadata_path = os.path.join(output_dir, f"reviews_{stamp}_metadata.json")
    metadata = {
        "generated_at": generated_at.isoformat(),
        "filters": result.criteria.to_dict(),
        "summary": result.summary.to_dict(),
        "kpis": {kpi.id: kpi.value for kpi in result.kpis},
    }
    with open(metadata_path, "w") as f:
        json.dump(metadata, f, indent=2)

    logger.info(f"Metadata saved to {metadata_path}")
    return output_path
