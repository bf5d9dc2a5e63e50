"""
Dataset loading.

Reads a numeric point matrix from delimited text. Lines starting with ``#``,
``%`` or ``@`` are skipped, which also lets plain ARFF data sections through.
"""

from typing import Optional, Sequence, Union
from pathlib import Path
import numpy as np
import torch
from torch import Tensor

from ..base.exceptions import DataFormatError

COMMENT_PREFIXES = ('#', '%', '@')


def load_points(source: Union[str, Path],
                delimiter: Optional[str] = None,
                usecols: Optional[Sequence[int]] = None,
                dtype: torch.dtype = torch.float64) -> Tensor:
    """Load an (n, d) point tensor from a text file.

    Args:
        source: Path to the file
        delimiter: Column separator; None splits on whitespace, and commas
            are detected automatically when the first data line contains one
        usecols: Optional subset of columns to keep (e.g. to drop a label)
        dtype: Tensor dtype of the result

    Returns:
        (n, d) tensor with one row per point

    Raises:
        DataFormatError: If the file is missing, empty, ragged, non-numeric
            or contains non-finite values
    """
    path = Path(source)
    try:
        with open(path, 'r', encoding='utf-8') as handle:
            lines = [line for line in handle
                     if line.strip() and not line.lstrip().startswith(COMMENT_PREFIXES)]
    except OSError as exc:
        raise DataFormatError(f"Cannot read dataset {path}: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise DataFormatError(f"Dataset {path} is not valid UTF-8 text: {exc}") from exc

    if not lines:
        raise DataFormatError(f"Dataset {path} contains no data rows")

    if delimiter is None and ',' in lines[0]:
        delimiter = ','

    try:
        data = np.loadtxt(lines, delimiter=delimiter, usecols=usecols,
                          dtype=np.float64, ndmin=2)
    except ValueError as exc:
        raise DataFormatError(f"Malformed dataset {path}: {exc}") from exc

    if data.shape[0] == 0 or data.shape[1] == 0:
        raise DataFormatError(f"Dataset {path} contains no data rows")
    if not np.isfinite(data).all():
        raise DataFormatError(f"Dataset {path} contains NaN or infinite values")

    return torch.from_numpy(data).to(dtype)
