"""Edge-list CSV loader for building forests from recorded connections."""

from dataclasses import dataclass
import logging
from pathlib import Path

import pandas as pd

logger = logging.getLogger(__name__)


@dataclass
class EdgeListResult:
    """Result of loading an edge list.

    Attributes:
        edges: (source, target) index pairs in file order
        inferred_size: Largest index seen plus one (0 for no edges)
        row_count: Number of rows in the CSV before dropping incomplete rows
    """

    edges: list[tuple[int, int]]
    inferred_size: int
    row_count: int


class EdgeListLoader:
    """Load and validate an edge list CSV.

    The CSV must have a header row containing the two endpoint columns.
    Rows missing either endpoint are dropped with a warning; any other
    non-integer value is rejected.
    """

    def __init__(self, source_column: str = "source", target_column: str = "target") -> None:
        self.source_column = source_column
        self.target_column = target_column

    def load(self, csv_path: Path) -> EdgeListResult:
        """Load edges from a CSV file.

        Args:
            csv_path: Path to the edge list CSV

        Returns:
            EdgeListResult with the parsed edges

        Raises:
            FileNotFoundError: If the CSV file does not exist
            ValueError: If endpoint columns are missing or hold non-integer values
        """
        if not csv_path.exists():
            raise FileNotFoundError(f"CSV file not found: {csv_path}")

        try:
            df = pd.read_csv(csv_path)
        except pd.errors.EmptyDataError:
            df = pd.DataFrame(columns=[self.source_column, self.target_column])

        return self.from_dataframe(df, source=str(csv_path))

    def from_dataframe(self, df: pd.DataFrame, source: str = "") -> EdgeListResult:
        """Extract edges from an already loaded DataFrame.

        Args:
            df: DataFrame holding the endpoint columns
            source: Source identifier for messages (e.g., file path)

        Returns:
            EdgeListResult with the parsed edges
        """
        source_info = f" ({source})" if source else ""
        columns = [self.source_column, self.target_column]

        missing_cols = set(columns) - set(df.columns)
        if missing_cols:
            raise ValueError(f"edge list missing required columns{source_info}: {missing_cols}")

        row_count = len(df)
        df = df[columns].dropna().copy()
        dropped = row_count - len(df)
        if dropped:
            logger.warning(f"Dropped {dropped} rows with missing endpoints{source_info}")

        for col in columns:
            values = pd.to_numeric(df[col], errors="coerce")
            if values.isna().any() or (values % 1 != 0).any():
                raise ValueError(f"column '{col}' must contain integer indices{source_info}")
            df[col] = values.astype(int)

        edges = list(zip(df[self.source_column].tolist(), df[self.target_column].tolist()))
        inferred_size = max(0, int(df[columns].max().max()) + 1) if edges else 0

        logger.info(f"Loaded {len(edges)} edges{source_info}")
        return EdgeListResult(edges=edges, inferred_size=inferred_size, row_count=row_count)
