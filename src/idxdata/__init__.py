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

from .util import IdxDataError, FormatError, NetworkError, DownloadExhaustedError, ExtractionError, DatasetNotFoundError
from .config import DatasetConfig, DatasetFile, MNIST
from .idx import RawImage, parse_labels, parse_images, encode_labels, encode_images, LABEL_MAGIC, IMAGE_MAGIC
from .extract import extract
from .fetch import fetch
from .mirror import MirrorAttempt, ResolveResult, download_archive, ensure_raw_file
from .dataset import Dataset, load

__all__ = [
    "IdxDataError",
    "FormatError",
    "NetworkError",
    "DownloadExhaustedError",
    "ExtractionError",
    "DatasetNotFoundError",
    "DatasetConfig",
    "DatasetFile",
    "MNIST",
    "RawImage",
    "parse_labels",
    "parse_images",
    "encode_labels",
    "encode_images",
    "LABEL_MAGIC",
    "IMAGE_MAGIC",
    "extract",
    "fetch",
    "MirrorAttempt",
    "ResolveResult",
    "download_archive",
    "ensure_raw_file",
    "Dataset",
    "load",
]
