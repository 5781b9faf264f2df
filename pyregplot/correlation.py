"""
Pairwise Pearson correlation over table columns.
"""

import warnings
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

import numpy as np
import pandas as pd
from scipy import stats

from .exceptions import UnknownColumnError
from .table import TableView


@dataclass(frozen=True)
class CorrelationMatrix:
    """
    Symmetric correlation matrix.

    Attributes
    ----------
    names : tuple of str
        Column names, in row/column order
    values : ndarray, shape (C, C)
        Pearson coefficients; diagonal exactly 1.0, NaN where undefined
    pvalues : ndarray, shape (C, C)
        Two-sided p-values for zero correlation; diagonal 0.0
    n_obs : ndarray, shape (C, C)
        Number of rows where both columns are finite
    """
    names: Tuple[str, ...]
    values: np.ndarray
    pvalues: np.ndarray
    n_obs: np.ndarray

    @property
    def size(self) -> int:
        return len(self.names)

    def _index(self, key):
        if isinstance(key, str):
            try:
                return self.names.index(key)
            except ValueError:
                raise UnknownColumnError(key, self.names) from None
        return int(key)

    def __getitem__(self, key):
        """``matrix['A', 'B']`` or ``matrix[0, 1]``."""
        row, col = key
        return float(self.values[self._index(row), self._index(col)])

    def to_frame(self) -> pd.DataFrame:
        """Coefficients as a labeled DataFrame."""
        return pd.DataFrame(self.values, index=self.names, columns=self.names)

    def summary(self):
        """Print the matrix as a table, with pairwise sample counts."""
        width = max([12] + [len(name) + 2 for name in self.names])
        rule = "-" * (width * (self.size + 1))

        print()
        print("Correlation matrix (Pearson)")
        print(rule)
        print(f"{'':<{width}}" + "".join(f"{name:>{width}}" for name in self.names))
        print(rule)
        for i, name in enumerate(self.names):
            cells = []
            for j in range(self.size):
                r = self.values[i, j]
                cells.append(f"{'NA':>{width}}" if np.isnan(r) else f"{r:>{width}.4f}")
            print(f"{name:<{width}}" + "".join(cells))
        print(rule)

        counts = self.n_obs[np.triu_indices(self.size, k=1)]
        if counts.size:
            print(f"Pairwise observations: {counts.min()} to {counts.max()}")
        print()

    def __repr__(self):
        return f"CorrelationMatrix(names={self.names})"


def pearson_pair(x: np.ndarray, y: np.ndarray):
    """
    Pearson correlation over rows where both values are finite.

    NaN and infinite values are excluded pairwise.

    Returns
    -------
    r : float
        Coefficient, NaN if fewer than 2 paired rows or zero variance
    pvalue : float
        Two-sided p-value, NaN when r is undefined
    n : int
        Number of paired rows used
    """
    both = np.isfinite(x) & np.isfinite(y)
    x, y = x[both], y[both]
    n = int(both.sum())
    if n < 2:
        return np.nan, np.nan, n

    with warnings.catch_warnings():
        # Constant input yields NaN, which is the expected result here
        warnings.simplefilter("ignore", stats.ConstantInputWarning)
        warnings.simplefilter("ignore", stats.NearConstantInputWarning)
        r, pvalue = stats.pearsonr(x, y)
    return float(r), float(pvalue), n


def compute_correlation_matrix(
    table: TableView,
    column_names: Optional[Sequence[str]] = None,
) -> CorrelationMatrix:
    """
    Compute the Pearson correlation matrix of table columns.

    Parameters
    ----------
    table : TableView or DataFrame
        Source data
    column_names : list of str, optional
        Columns to include, in output order (default: all columns)

    Returns
    -------
    CorrelationMatrix
        Symmetric matrix with the diagonal fixed at 1.0

    Raises
    ------
    UnknownColumnError
        If a requested name is absent from the table

    Notes
    -----
    Each pair uses only the rows where both values are finite; NaN and
    infinite cells are excluded pairwise, never row-wise.

    Examples
    --------
    >>> table = TableView({'a': [1, 2, 3, 4], 'b': [5, 7, 9, 11]})
    >>> corr = compute_correlation_matrix(table)
    >>> round(corr['a', 'b'], 6)
    1.0
    """
    if not isinstance(table, TableView):
        table = TableView(table)

    names = table.column_names if column_names is None else list(column_names)
    columns = table.to_float_matrix(names)
    c = len(names)

    values = np.eye(c, dtype=np.float64)
    pvalues = np.zeros((c, c), dtype=np.float64)
    n_obs = np.zeros((c, c), dtype=np.int64)

    for i in range(c):
        n_obs[i, i] = int(np.sum(np.isfinite(columns[i])))
        for j in range(i + 1, c):
            r, p, n = pearson_pair(columns[i], columns[j])
            if n < 2:
                warnings.warn(
                    f"Fewer than 2 rows with values in both '{names[i]}' and "
                    f"'{names[j]}'; correlation is undefined"
                )
            values[i, j] = values[j, i] = r
            pvalues[i, j] = pvalues[j, i] = p
            n_obs[i, j] = n_obs[j, i] = n

    for arr in (values, pvalues, n_obs):
        arr.setflags(write=False)

    return CorrelationMatrix(names=tuple(names), values=values, pvalues=pvalues, n_obs=n_obs)
