"""
Read-only view over a column-oriented numeric table.
"""

from typing import List, Mapping, Optional, Sequence, Tuple, Union

import numpy as np
import pandas as pd

from .exceptions import LengthMismatchError, UnknownColumnError


class TableView:
    """
    Named float columns of equal length.

    Non-numeric cells become NaN; rows are never dropped, so row alignment
    across columns is preserved.

    Parameters
    ----------
    data : DataFrame or mapping of name -> sequence
        Source table

    Examples
    --------
    >>> table = TableView({'TRIP_MILES': [1.2, 3.4], 'FARE': [6.5, 12.0]})
    >>> table.column_names
    ['TRIP_MILES', 'FARE']
    >>> table.n_rows
    2
    """

    def __init__(self, data: Union[pd.DataFrame, Mapping[str, Sequence[float]]]):
        if isinstance(data, pd.DataFrame):
            frame = data.copy()
        else:
            lengths = {name: len(values) for name, values in data.items()}
            if len(set(lengths.values())) > 1:
                raise LengthMismatchError(f"Columns differ in length: {lengths}")
            frame = pd.DataFrame({name: list(values) for name, values in data.items()})

        names = [str(c) for c in frame.columns]
        if len(set(names)) != len(names):
            duplicates = sorted({n for n in names if names.count(n) > 1})
            raise ValueError(f"Duplicate column names: {duplicates}")
        frame.columns = names

        self._frame = frame.apply(pd.to_numeric, errors='coerce').astype(np.float64)
        self._frame.reset_index(drop=True, inplace=True)

    @property
    def column_names(self) -> List[str]:
        return list(self._frame.columns)

    @property
    def n_rows(self) -> int:
        return len(self._frame)

    @property
    def n_columns(self) -> int:
        return self._frame.shape[1]

    def has_column(self, name: str) -> bool:
        return name in self._frame.columns

    def column(self, name: str) -> np.ndarray:
        """Values of one column (read-only copy)."""
        if not self.has_column(name):
            raise UnknownColumnError(name, self.column_names)
        values = self._frame[name].to_numpy(dtype=np.float64, copy=True)
        values.setflags(write=False)
        return values

    def select(self, names: Sequence[str]) -> "TableView":
        """New view restricted to ``names``, in that order."""
        self._check_names(names)
        return TableView(self._frame[list(names)])

    def to_float_matrix(self, names: Optional[Sequence[str]] = None) -> List[np.ndarray]:
        """Columns as a list of float arrays (column-major)."""
        names = self.column_names if names is None else list(names)
        self._check_names(names)
        return [self.column(name) for name in names]

    def pairs(self, names: Optional[Sequence[str]] = None) -> List[Tuple[str, np.ndarray]]:
        """Columns as ``(name, values)`` pairs, the input of ``render_pair_grid``."""
        names = self.column_names if names is None else list(names)
        return list(zip(names, self.to_float_matrix(names)))

    def to_frame(self) -> pd.DataFrame:
        """Copy of the underlying DataFrame."""
        return self._frame.copy()

    def describe(self):
        """Print dimensions, column types, summary statistics and the first rows."""
        print()
        print(f"Dimensions: {self.n_rows} rows x {self.n_columns} columns")
        print(f"Columns:    {self.column_names}")
        print(f"Types:      {[str(t) for t in self._frame.dtypes]}")
        print()
        print("Summary statistics:")
        print(self._frame.describe().to_string())
        print()
        print("First rows:")
        print(self._frame.head(10).to_string())
        print()

    def _check_names(self, names):
        for name in names:
            if not self.has_column(name):
                raise UnknownColumnError(name, self.column_names)

    def __len__(self):
        return self.n_rows

    def __repr__(self):
        return f"TableView(rows={self.n_rows}, columns={self.column_names})"
