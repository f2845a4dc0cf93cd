"""Time series data structures."""
from dataclasses import dataclass, asdict, field
from typing import List
import pandas as pd


@dataclass
class TimeSeries:
    """Iteration history of a solve.

    Parameters
    ----------
    residual : List[float]
        Maximum change of C relative to its largest value, per iteration.
    first_moment : List[float], optional
        First moment N after each iteration. Default is empty.
    """
    residual: List[float] = field(default_factory=list)
    first_moment: List[float] = field(default_factory=list)

    def to_dataframe(self) -> pd.DataFrame:
        """Convert time series to DataFrame for analysis and plotting.

        Returns
        -------
        pd.DataFrame
            DataFrame with columns residual and first_moment.
            Index represents iteration number.
        """
        return pd.DataFrame(asdict(self))
