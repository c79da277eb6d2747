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
from typing import Any, Iterable, Sequence
import struct

import numpy as _np
import numpy.typing as _npt

from .util import FormatError

LABEL_MAGIC = 2049
IMAGE_MAGIC = 2051

_LABEL_HEADER = struct.Struct(">II")
_IMAGE_HEADER = struct.Struct(">IIII")

@dataclass(frozen=True)
class RawImage:
    rows   : int
    cols   : int
    pixels : bytes

    def __post_init__(self) -> None:
        if len(self.pixels) != self.rows * self.cols:
            raise FormatError(f"Image of {self.rows}x{self.cols} needs {self.rows * self.cols} pixels, "
                              f"got {len(self.pixels)}.")

    @property
    def shape(self) -> tuple[int, int]:
        return (self.rows, self.cols)

    def to_array(self) -> _npt.NDArray[_np.uint8]:
        arr = _np.frombuffer(self.pixels, dtype=_np.uint8)
        return arr.reshape(self.rows, self.cols)

def _unpack_header(header: struct.Struct, data: bytes, kind: str) -> tuple[Any, ...]:
    if len(data) < header.size:
        raise FormatError(f"Invalid {kind} data. Truncated header "
                          f"({len(data)} of {header.size} bytes).")
    return header.unpack_from(data)

def parse_labels(data: bytes) -> list[int]:
    """Decode an IDX label file (`[u32 2049][u32 N][N bytes]`, big-endian)."""
    data = bytes(data)
    magic, num_items = _unpack_header(_LABEL_HEADER, data, "label")

    if magic != LABEL_MAGIC:
        raise FormatError(f"Invalid label data. Wrong magic number {magic} (expected {LABEL_MAGIC}).")

    body = data[_LABEL_HEADER.size:]
    if len(body) != num_items:
        raise FormatError(f"Invalid label data. Wrong item count: header declares {num_items}, "
                          f"found {len(body)}.")

    return list(body)

def parse_images(data: bytes) -> list[RawImage]:
    """Decode an IDX image file.

    Layout is `[u32 2051][u32 N][u32 rows][u32 cols]` followed by exactly
    `N*rows*cols` pixel bytes, each image stored row-major and contiguously.
    """
    data = bytes(data)
    magic, num_items, rows, cols = _unpack_header(_IMAGE_HEADER, data, "image")

    if magic != IMAGE_MAGIC:
        raise FormatError(f"Invalid image data. Wrong magic number {magic} (expected {IMAGE_MAGIC}).")

    pixels_per_image = rows * cols
    body = data[_IMAGE_HEADER.size:]
    if len(body) != num_items * pixels_per_image:
        raise FormatError(f"Invalid image data. Wrong item count: header declares {num_items} images of "
                          f"{rows}x{cols} ({num_items * pixels_per_image} bytes), found {len(body)} bytes.")

    if pixels_per_image == 0:
        return [RawImage(rows=rows, cols=cols, pixels=b"") for _ in range(num_items)]

    return [RawImage(rows   = rows,
                     cols   = cols,
                     pixels = body[i:i + pixels_per_image])
            for i in range(0, len(body), pixels_per_image)]

def encode_labels(labels: Iterable[int]) -> bytes:
    body = bytes(labels)
    return _LABEL_HEADER.pack(LABEL_MAGIC, len(body)) + body

def encode_images(images: Sequence[RawImage], shape: tuple[int, int] | None = None) -> bytes:
    if shape is None:
        if len(images) == 0:
            raise ValueError("`shape` must be given when encoding an empty image sequence.")
        shape = images[0].shape

    rows, cols = shape
    for i, image in enumerate(images):
        if image.shape != shape:
            raise ValueError(f"Image {i} has shape {image.shape}, expected {shape}.")

    return _IMAGE_HEADER.pack(IMAGE_MAGIC, len(images), rows, cols) + b"".join(image.pixels for image in images)
