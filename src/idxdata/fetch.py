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
from typing import Any
import logging

import requests
import urllib3
from tqdm import tqdm

from .util import NetworkError

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 64 * 1024
DEFAULT_TIMEOUT    = 30.0

def fetch(url            : str,
          destination_dir: str | Path,
          filename       : str,
          *,
          session        : Any | None = None,
          chunk_size     : int        = DEFAULT_CHUNK_SIZE,
          timeout        : float      = DEFAULT_TIMEOUT,
          progress       : bool       = True,
          ) -> Path:
    """Download `url` into `destination_dir/filename`, streaming the body to disk.

    Any non-success HTTP status or transport failure raises `NetworkError`.
    If the transfer breaks off partway, the partially written file is left
    in place; callers must not treat it as usable.
    """
    destination_dir = Path(destination_dir)
    http = session if session is not None else requests

    logger.info("Downloading %s ...", url)

    try:
        response = http.get(url, stream=True, timeout=timeout)
    except requests.RequestException as e:
        raise NetworkError(url, str(e)) from e

    with response:
        try:
            response.raise_for_status()
        except requests.HTTPError as e:
            raise NetworkError(url, str(e)) from e

        content_length = response.headers.get("content-length")
        total = int(content_length) if content_length is not None and content_length.isdigit() else None

        destination_dir.mkdir(parents=True, exist_ok=True)
        fullpath = destination_dir / filename

        with open(fullpath, "wb") as f, tqdm(total      = total,
                                             unit       = "B",
                                             unit_scale = True,
                                             desc       = filename,
                                             disable    = not progress) as pbar:
            try:
                # archives are stored as served, even under Content-Encoding: gzip
                for chunk in response.raw.stream(chunk_size, decode_content=False):
                    f.write(chunk)
                    pbar.update(len(chunk))
            except (requests.RequestException, urllib3.exceptions.HTTPError) as e:
                raise NetworkError(url, f"transfer interrupted after {pbar.n} bytes: {e}") from e

    logger.info("Downloaded %s to %s", url, fullpath)
    return fullpath
