from dataclasses import dataclass
from typing import List
import numpy as np

from aifh.ml.basic_data import BasicData, convert_arrays


@dataclass
class MLDataset:
    """Simple container for ML data - just X (inputs) and y (ideals) matrices, one row per element."""
    X: np.ndarray
    y: np.ndarray
    metadata: dict = None

    def __post_init__(self):
        """Validate that X and y have compatible shapes."""
        self.X = np.asarray(self.X, dtype=np.float64)
        self.y = np.asarray(self.y, dtype=np.float64)
        if self.X.ndim != 2 or self.y.ndim != 2:
            raise ValueError(f"X and y must be 2D. Got X: {self.X.shape}, y: {self.y.shape}")
        if len(self.X) != len(self.y):
            raise ValueError(f"X and y must have same length. Got X: {len(self.X)}, y: {len(self.y)}")

        # Initialize empty metadata if None
        if self.metadata is None:
            self.metadata = {}

    def __len__(self) -> int:
        return len(self.X)

    @classmethod
    def from_samples(cls, samples: List[BasicData]) -> 'MLDataset':
        """
        Stack a list of BasicData elements into a dataset. The vectors are copied.
        Labels are kept in metadata["labels"] when at least one element has one.

        Raises:
            ValueError: If samples is empty or the vector lengths differ between elements.
        """
        if not samples:
            raise ValueError("Cannot build a dataset from an empty list of samples.")

        input_count = samples[0].input_count
        ideal_count = samples[0].ideal_count
        for i, sample in enumerate(samples):
            if sample.input_count != input_count or sample.ideal_count != ideal_count:
                raise ValueError(
                    f"All samples must have the same vector lengths. "
                    f"Sample 0 has ({input_count}, {ideal_count}), "
                    f"but sample {i} has ({sample.input_count}, {sample.ideal_count})"
                )

        X = np.array([sample.input for sample in samples], dtype=np.float64).reshape(len(samples), input_count)
        y = np.array([sample.ideal for sample in samples], dtype=np.float64).reshape(len(samples), ideal_count)

        metadata = {}
        labels = [sample.label for sample in samples]
        if any(label is not None for label in labels):
            metadata["labels"] = labels
        return cls(X=X, y=y, metadata=metadata)

    def to_samples(self) -> List[BasicData]:
        """
        Materialize one BasicData element per row, restoring labels from metadata["labels"] if present.
        An empty dataset gives an empty list.
        """
        if len(self.X) == 0:
            return []

        samples = convert_arrays(self.X, self.y)
        labels = self.metadata.get("labels")
        if labels is not None:
            if len(labels) != len(samples):
                raise ValueError(
                    f"metadata['labels'] has {len(labels)} entries but the dataset has {len(samples)} rows"
                )
            for sample, label in zip(samples, labels):
                sample.label = label
        return samples
