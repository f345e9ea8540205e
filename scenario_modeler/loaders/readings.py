"""
Glucose readings loader.

Parses two-column ``timestamp,glucoseValue`` CSV exports (mmol/L) into the
standardized readings DataFrame used by the daily aggregator.
"""

import logging
import warnings
from pathlib import Path
from typing import Iterable, Optional, Tuple, Union

import pandas as pd
from pandas.api.types import is_datetime64_any_dtype

logger = logging.getLogger(__name__)

READING_COLUMNS = ['timestamp', 'glucose_mmol_l', 'date', 'hour']


def _to_local(value, timezone: Optional[str]):
    """One timestamp as naive local time; NaT when unparseable."""
    try:
        stamp = pd.Timestamp(value)
    except (ValueError, TypeError, OverflowError):
        return pd.NaT
    if pd.isna(stamp):
        return pd.NaT
    if stamp.tzinfo is not None:
        stamp = stamp.tz_convert(timezone or 'UTC').tz_localize(None)
    return stamp


def _parse_timestamps(raw: pd.Series, timezone: Optional[str]) -> pd.Series:
    """Parse timestamps to naive local wall-clock time.

    Naive values are taken as local time already. tz-aware values are
    converted to ``timezone`` (UTC when None) and then the offset is
    dropped, so calendar date and hour are read from the same clock.
    """
    with warnings.catch_warnings():
        warnings.simplefilter('ignore', FutureWarning)
        try:
            parsed = pd.to_datetime(raw, errors='coerce', format='mixed')
        except ValueError:
            parsed = None

    if parsed is None or not is_datetime64_any_dtype(parsed):
        # Mixed UTC offsets, or aware and naive values, in one column
        return pd.to_datetime(raw.map(lambda value: _to_local(value, timezone)))

    if parsed.dt.tz is not None:
        parsed = parsed.dt.tz_convert(timezone or 'UTC').dt.tz_localize(None)

    return parsed


def clean_readings(
    df: pd.DataFrame,
    timestamp_col: str = 'timestamp',
    glucose_col: str = 'glucose',
    timezone: Optional[str] = None,
) -> pd.DataFrame:
    """Standardize raw readings.

    Rows with an unparseable timestamp or a non-numeric glucose value are
    dropped. Adds ``date`` (calendar date) and ``hour`` (0-23) columns.

    Returns:
        DataFrame with columns: timestamp, glucose_mmol_l, date, hour
    """
    out = pd.DataFrame({
        'timestamp': _parse_timestamps(df[timestamp_col], timezone),
        'glucose_mmol_l': pd.to_numeric(df[glucose_col], errors='coerce'),
    })

    before = len(out)
    out = out.dropna(subset=['timestamp', 'glucose_mmol_l'])
    dropped = before - len(out)
    if dropped:
        logger.info("Dropped %d of %d readings with invalid timestamp or value", dropped, before)

    out = out.sort_values('timestamp', kind='stable').reset_index(drop=True)
    out['date'] = out['timestamp'].dt.date
    out['hour'] = out['timestamp'].dt.hour.astype(int)

    return out[READING_COLUMNS]


def readings_from_records(
    records: Iterable[Tuple[object, object]],
    timezone: Optional[str] = None,
) -> pd.DataFrame:
    """Build a readings DataFrame from (timestamp, value) pairs."""
    df = pd.DataFrame(list(records), columns=['timestamp', 'glucose'])
    if df.empty:
        return pd.DataFrame({
            'timestamp': pd.Series(dtype='datetime64[ns]'),
            'glucose_mmol_l': pd.Series(dtype=float),
            'date': pd.Series(dtype=object),
            'hour': pd.Series(dtype=int),
        })
    return clean_readings(df, timezone=timezone)


class GlucoseReadingsLoader:
    """Loader for two-column glucose CSV exports.

    Known header names are matched first; otherwise the first two columns
    are taken as timestamp and glucose value.
    """

    # Known column name variations
    TIMESTAMP_COLUMNS = [
        'timestamp',
        'Timestamp',
        'DateTime',
        'Date',
        'date',
    ]

    GLUCOSE_COLUMNS = [
        'glucoseValue',
        'Glucose Value (mmol/L)',
        'Blood Glucose (mmol/L)',
        'Glucose',
        'glucose',
        'value',
    ]

    def __init__(self, filepath: Union[str, Path], timezone: Optional[str] = None):
        """Initialize loader with file path.

        Args:
            filepath: Path to the CSV export.
            timezone: Timezone for tz-aware timestamps (UTC when None).
        """
        self.filepath = Path(filepath)
        self.timezone = timezone
        self._df: Optional[pd.DataFrame] = None
        self._raw_rows = 0

    def load(self) -> pd.DataFrame:
        """Load and parse the CSV.

        Returns:
            DataFrame with columns: timestamp, glucose_mmol_l, date, hour

        Raises:
            ValueError: If the file has fewer than two columns.
        """
        # Read with UTF-8-BOM handling; rows with extra fields are skipped
        df = pd.read_csv(
            self.filepath,
            encoding='utf-8-sig',
            dtype=str,
            on_bad_lines='skip',
            skipinitialspace=True,
        )
        df.columns = df.columns.str.strip()

        if len(df.columns) < 2:
            raise ValueError(
                f"Expected timestamp and glucose columns in {self.filepath}. "
                f"Found columns: {list(df.columns)}"
            )

        timestamp_col = self._find_column(df, self.TIMESTAMP_COLUMNS) or df.columns[0]
        glucose_col = self._find_column(df, self.GLUCOSE_COLUMNS) or df.columns[1]

        self._raw_rows = len(df)
        self._df = clean_readings(df, timestamp_col, glucose_col, timezone=self.timezone)

        logger.info("Loaded %d readings from %s", len(self._df), self.filepath)
        return self._df

    def _find_column(self, df: pd.DataFrame, candidates: list) -> Optional[str]:
        """Find matching column name from candidates."""
        for candidate in candidates:
            if candidate in df.columns:
                return candidate
        return None

    @property
    def df(self) -> pd.DataFrame:
        """Get loaded DataFrame (loads on first access)."""
        if self._df is None:
            self._df = self.load()
        return self._df

    @property
    def raw_rows(self) -> int:
        """Data rows in the file before invalid ones were dropped."""
        if self._df is None:
            self.load()
        return self._raw_rows

    def get_readings_count(self) -> int:
        """Get number of valid readings."""
        return len(self.df)
