# Copyright 2025 TOYOTA MOTOR CORPORATION.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Any
import logging

import numpy as _np
import numpy.typing as _npt

from .config import DatasetConfig, DatasetFile, MNIST
from .fetch import fetch
from .idx import RawImage, parse_images, parse_labels
from .mirror import Fetcher, ensure_raw_file
from .util import FormatError, DatasetNotFoundError

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class Dataset:
    train_images : tuple[RawImage, ...]
    train_labels : tuple[int, ...]
    test_images  : tuple[RawImage, ...]
    test_labels  : tuple[int, ...]

    def __post_init__(self) -> None:
        for split in ("train", "test"):
            n_images = len(getattr(self, f"{split}_images"))
            n_labels = len(getattr(self, f"{split}_labels"))
            if n_images != n_labels:
                raise FormatError(f"The {split} split has {n_images} images but {n_labels} labels.")

    @classmethod
    def load(cls,
             root     : str | Path,
             download : bool = False,
             *,
             config   : DatasetConfig = MNIST,
             fetcher  : Fetcher       = fetch,
             ) -> Dataset:
        return load(root, download, config=config, fetcher=fetcher)

    @property
    def train(self) -> tuple[tuple[RawImage, ...], tuple[int, ...]]:
        return self.train_images, self.train_labels

    @property
    def test(self) -> tuple[tuple[RawImage, ...], tuple[int, ...]]:
        return self.test_images, self.test_labels

    @property
    def num_classes(self) -> int:
        return len(set(self.train_labels) | set(self.test_labels))

    def to_numpy(self) -> dict[str, _npt.NDArray[Any]]:
        return {
            "train_images" : _images_to_array(self.train_images),
            "train_labels" : _np.array(self.train_labels, dtype=_np.uint8),
            "test_images"  : _images_to_array(self.test_images),
            "test_labels"  : _np.array(self.test_labels, dtype=_np.uint8),
        }

def _images_to_array(images: tuple[RawImage, ...]) -> _npt.NDArray[_np.uint8]:
    if len(images) == 0:
        return _np.zeros((0, 0, 0), dtype=_np.uint8)
    return _np.stack([image.to_array() for image in images])

def _read_raw(root: Path, file: DatasetFile) -> bytes:
    try:
        return (root / file.raw).read_bytes()
    except FileNotFoundError as e:
        raise DatasetNotFoundError(str(root), file.raw) from e

def load(root     : str | Path,
         download : bool = False,
         *,
         config   : DatasetConfig = MNIST,
         fetcher  : Fetcher       = fetch,
         ) -> Dataset:
    root = Path(root)

    if download:
        for file in config.files:
            ensure_raw_file(root, file, config.mirrors, fetcher=fetcher)

    train_images_file = _read_raw(root, config.train_images)
    train_labels_file = _read_raw(root, config.train_labels)
    test_images_file  = _read_raw(root, config.test_images)
    test_labels_file  = _read_raw(root, config.test_labels)

    dataset = Dataset(train_images = tuple(parse_images(train_images_file)),
                      train_labels = tuple(parse_labels(train_labels_file)),
                      test_images  = tuple(parse_images(test_images_file)),
                      test_labels  = tuple(parse_labels(test_labels_file)))

    logger.info("Loaded %s from %s (%d train, %d test)",
                config.name, root, len(dataset.train_labels), len(dataset.test_labels))
    return dataset
