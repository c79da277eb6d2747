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
from pathlib import Path
import gzip
import logging
import os
import zlib

from .util import ExtractionError

logger = logging.getLogger(__name__)

def extract(compressed_path: str | Path, destination_path: str | Path) -> Path:
    compressed_path  = Path(compressed_path)
    destination_path = Path(destination_path)

    with gzip.open(compressed_path, "rb") as f:
        try:
            data = f.read()
        except (gzip.BadGzipFile, EOFError, zlib.error) as e:
            raise ExtractionError(f"Corrupt gzip stream in {compressed_path}: {e}") from e

    tmp_path = destination_path.with_suffix(destination_path.suffix + ".tmp")
    try:
        tmp_path.write_bytes(data)
        os.replace(tmp_path, destination_path)
    except OSError:
        tmp_path.unlink(missing_ok=True)
        raise

    logger.info("Extracted %s to %s (%d bytes)", compressed_path.name, destination_path, len(data))
    return destination_path
