"""
We import the data classes here so that elsewhere in the code we can do:
from aifh.ml import BasicData

rather than:
from aifh.ml.basic_data import BasicData
"""

from aifh.ml.basic_data import BasicData, ShapeMismatchError, convert_arrays
from aifh.ml.dataset import MLDataset


__all__ = [
    "BasicData",
    "ShapeMismatchError",
    "convert_arrays",
    "MLDataset",
]
