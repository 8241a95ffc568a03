"""Generates visualizations from results files."""
import logging
from pathlib import Path
from typing import Union

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import pandas as pd
import seaborn as sns

from .constants import BatchConstants


# Configure logging
logger = logging.getLogger(__name__)


class VisualizationGenerator:
    """Generates visualizations from results files."""

    def plot_latency_by_endpoint(self, df: pd.DataFrame, output_path: Union[Path, str]) -> bool:
        """
        Save a box plot of total time per endpoint.

        Args:
            df: Records as returned by ResultAnalyzer.load_records.
            output_path: Path to save the PNG.

        Returns:
            True if a plot was written.
        """
        required = {BatchConstants.URL_FIELD, BatchConstants.TIME_TOTAL_FIELD}
        if df.empty or not required.issubset(df.columns):
            logger.warning("No records with url and time_total available. Skipping plot.")
            return False

        urls = sorted(df[BatchConstants.URL_FIELD].unique())
        fig, ax = plt.subplots(figsize=(12, max(4, 0.6 * len(urls) + 2)))
        sns.boxplot(data=df, x=BatchConstants.TIME_TOTAL_FIELD, y=BatchConstants.URL_FIELD,
                    order=urls, orient="h", ax=ax)
        sns.stripplot(data=df, x=BatchConstants.TIME_TOTAL_FIELD, y=BatchConstants.URL_FIELD,
                      order=urls, orient="h", color="black", size=3, alpha=0.5, ax=ax)
        ax.set_title("Total Time by Endpoint")
        ax.set_xlabel("Total time (ms)")
        ax.set_ylabel("")
        ax.grid(True, axis="x", alpha=0.3)

        plt.tight_layout()
        plt.savefig(output_path)
        plt.close(fig)
        logger.info(f"Graph saved: {output_path}")
        return True
