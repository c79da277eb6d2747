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
from dataclasses import dataclass, replace

@dataclass(frozen=True)
class DatasetFile:
    archive : str
    raw     : str

@dataclass(frozen=True)
class DatasetConfig:
    name    : str
    mirrors : tuple[str, ...]
    files   : tuple[DatasetFile, ...]

    def __post_init__(self) -> None:
        if len(self.files) != 4:
            raise ValueError("A dataset consists of exactly four files "
                             "(train images, train labels, test images, test labels).")

    @property
    def train_images(self) -> DatasetFile:
        return self.files[0]

    @property
    def train_labels(self) -> DatasetFile:
        return self.files[1]

    @property
    def test_images(self) -> DatasetFile:
        return self.files[2]

    @property
    def test_labels(self) -> DatasetFile:
        return self.files[3]

    def with_mirrors(self, *mirrors: str) -> DatasetConfig:
        if len(mirrors) == 0:
            raise ValueError("At least one mirror is required.")
        return replace(self, mirrors=tuple(mirrors))

MNIST = DatasetConfig(
    name    = "MNIST",
    mirrors = (
        "http://yann.lecun.com/exdb/mnist/",
        "https://ossci-datasets.s3.amazonaws.com/mnist/",
    ),
    files   = (
        DatasetFile("train-images-idx3-ubyte.gz", "train-images.idx3-ubyte"),
        DatasetFile("train-labels-idx1-ubyte.gz", "train-labels.idx1-ubyte"),
        DatasetFile("t10k-images-idx3-ubyte.gz",  "t10k-images.idx3-ubyte"),
        DatasetFile("t10k-labels-idx1-ubyte.gz",  "t10k-labels.idx1-ubyte"),
    ),
)
