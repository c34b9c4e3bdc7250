import logging
from numbers import Integral
from typing import List, Optional, Sequence

import numpy as np

from aifh.utils.strings import format_label, format_vector

logger = logging.getLogger(__name__)


class ShapeMismatchError(ValueError):
    """Raised when the input and ideal matrices given to convert_arrays do not line up."""
    def __init__(self, message: str, row: int, matrix: str):
        super().__init__(message)
        self.row = row
        self.matrix = matrix


def _as_vector(values, name: str) -> np.ndarray:
    """
    Adopt `values` as a float64 vector. A writeable float64 ndarray is used as-is (no copy),
    anything else is converted once into a new array.
    """
    if values is None:
        raise ValueError(f"The {name} vector is required, got None.")
    vector = np.asarray(values, dtype=np.float64)
    if vector.ndim != 1:
        raise ValueError(f"The {name} vector must be one-dimensional, got shape {vector.shape}.")
    if not vector.flags.writeable:
        vector = np.array(vector, dtype=np.float64)
    return vector


def _check_label(label) -> None:
    if label is not None and not isinstance(label, str):
        raise TypeError(f"Label must be a string or None, got {type(label).__name__}.")


def _check_dimensions(dims, name: str) -> None:
    if not isinstance(dims, Integral) or isinstance(dims, bool):
        raise TypeError(f"{name} must be an integer, got {type(dims).__name__}.")
    if dims < 0:
        raise ValueError(f"{name} must be non-negative, got {dims}.")


class BasicData:
    """
    A single item of training data: an input vector, an ideal (expected output) vector and an
    optional label.

    An element whose ideal vector is empty is unsupervised. The lengths of both vectors are fixed
    when the element is built, but their values may be filled in afterwards through the arrays
    returned by get_input() and get_ideal(), which are the element's own storage.

    Note that a float64 ndarray passed to the constructor is not copied: later changes made
    through the caller's array are seen by the element, and vice versa. A read-only array (for
    instance a np.broadcast_to view) is copied instead, so the element's vectors can always be
    filled in.
    """

    def __init__(self, input: Sequence[float], ideal: Optional[Sequence[float]] = None,
                 label: Optional[str] = None):
        """
        Construct an element from existing vectors.

        Args:
            input: The input vector.
            ideal: The ideal vector. If None, the element is unsupervised and gets an empty ideal vector.
            label: An optional label used to tag this element.

        Raises:
            ValueError: If input is None or either vector is not one-dimensional.
            TypeError: If label is neither a string nor None.
        """
        _check_label(label)
        self._input = _as_vector(input, "input")
        if ideal is None:
            self._ideal = np.zeros(0, dtype=np.float64)
        else:
            self._ideal = _as_vector(ideal, "ideal")
        self._label = label

    @classmethod
    def zeros(cls, input_dims: int, ideal_dims: int = 0, label: Optional[str] = None) -> 'BasicData':
        """
        Construct an empty element with zero-filled vectors.
        With ideal_dims == 0 (the default) the element is unsupervised.

        Raises:
            ValueError: If a dimension is negative.
            TypeError: If a dimension is not an integer.
        """
        _check_dimensions(input_dims, "input_dims")
        _check_dimensions(ideal_dims, "ideal_dims")
        return cls(np.zeros(input_dims, dtype=np.float64),
                   np.zeros(ideal_dims, dtype=np.float64),
                   label)

    @property
    def input(self) -> np.ndarray:
        return self._input

    @property
    def ideal(self) -> np.ndarray:
        return self._ideal

    @property
    def label(self) -> Optional[str]:
        return self._label

    @label.setter
    def label(self, value: Optional[str]) -> None:
        _check_label(value)
        self._label = value

    @property
    def input_count(self) -> int:
        return len(self._input)

    @property
    def ideal_count(self) -> int:
        return len(self._ideal)

    @property
    def is_supervised(self) -> bool:
        """True when the element carries an expected output."""
        return len(self._ideal) > 0

    def get_input(self) -> np.ndarray:
        """Returns the input vector itself, not a copy."""
        return self._input

    def get_ideal(self) -> np.ndarray:
        """Returns the ideal vector itself, not a copy."""
        return self._ideal

    def get_label(self) -> Optional[str]:
        return self._label

    def set_label(self, label: Optional[str]) -> None:
        self.label = label

    def __str__(self) -> str:
        return (f"[BasicData: input:{format_vector(self._input)}, "
                f"ideal:{format_vector(self._ideal)}, "
                f"label:{format_label(self._label)}]")

    __repr__ = __str__


def _row_width(matrix, name: str) -> int:
    try:
        return len(matrix[0])
    except TypeError as e:
        raise ValueError(f"{name} must be a two-dimensional matrix (a sequence of rows).") from e


def _as_row(values, width: int, row: int, matrix: str) -> np.ndarray:
    """Read one matrix row as a float64 vector holding at least `width` values."""
    try:
        vector = np.asarray(values, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise ShapeMismatchError(
            f"Row {row} of {matrix}_data could not be read as a vector of numbers.",
            row=row, matrix=matrix,
        ) from e
    if vector.ndim != 1:
        raise ShapeMismatchError(
            f"Row {row} of {matrix}_data must be one-dimensional, got shape {vector.shape}.",
            row=row, matrix=matrix,
        )
    if len(vector) < width:
        raise ShapeMismatchError(
            f"Row {row} of {matrix}_data has {len(vector)} values, expected {width}.",
            row=row, matrix=matrix,
        )
    return vector[:width]


def convert_arrays(input_data, ideal_data) -> List[BasicData]:
    """
    Convert two matrices into a list of BasicData elements, one per row.
    One matrix holds the input vectors and the other the ideal vectors.

    The vector widths are taken from the first row of each matrix. Every element gets fresh
    storage, so the result never shares memory with the matrices or with other elements.
    Rows of ideal_data beyond the number of input rows are ignored.

    Args:
        input_data: A sequence of input rows, or a 2D numpy array.
        ideal_data: A sequence of ideal rows, or a 2D numpy array.

    Returns:
        List[BasicData]: The elements, in row order, all without a label.

    Raises:
        ValueError: If input_data has no rows or either argument is not a matrix.
        ShapeMismatchError: If a row is not a flat vector of numbers, is narrower than the
            first row of its matrix, or ideal_data has fewer rows than input_data.
    """
    if len(input_data) == 0:
        raise ValueError("input_data must contain at least one row.")
    if len(ideal_data) == 0:
        raise ShapeMismatchError("ideal_data has no rows; expected one per input row.", row=0, matrix="ideal")

    # get the lengths
    input_count = _row_width(input_data, "input_data")
    ideal_count = _row_width(ideal_data, "ideal_data")

    result = []
    for row in range(len(input_data)):
        if row >= len(ideal_data):
            raise ShapeMismatchError(
                f"ideal_data has {len(ideal_data)} rows but input_data has {len(input_data)}; "
                f"no ideal row for row {row}.",
                row=row, matrix="ideal",
            )
        input_row = _as_row(input_data[row], input_count, row, "input")
        ideal_row = _as_row(ideal_data[row], ideal_count, row, "ideal")

        data_row = BasicData.zeros(input_count, ideal_count)
        data_row.input[:] = input_row
        data_row.ideal[:] = ideal_row
        result.append(data_row)

    if len(ideal_data) > len(input_data):
        logger.debug(
            "Ignoring extra ideal rows",
            extra={"input_rows": len(input_data), "ideal_rows": len(ideal_data)},
        )
    return result
