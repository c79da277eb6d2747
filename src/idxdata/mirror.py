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
from typing import Callable, Sequence
import logging

from .config import DatasetFile
from .extract import extract
from .fetch import fetch
from .util import NetworkError, DownloadExhaustedError

logger = logging.getLogger(__name__)

Fetcher = Callable[[str, Path, str], Path]

@dataclass(frozen=True)
class MirrorAttempt:
    mirror : str
    url    : str
    error  : NetworkError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

@dataclass(frozen=True)
class ResolveResult:
    archive  : str
    path     : Path | None
    attempts : tuple[MirrorAttempt, ...]

    @property
    def ok(self) -> bool:
        return self.path is not None

def download_archive(root    : str | Path,
                     archive : str,
                     mirrors : Sequence[str],
                     *,
                     fetcher : Fetcher = fetch,
                     ) -> ResolveResult:
    root = Path(root)
    attempts: list[MirrorAttempt] = []

    for mirror in mirrors:
        url = mirror + archive
        try:
            path = fetcher(url, root, archive)
        except NetworkError as e:
            logger.warning("Failed to download %s (trying another mirror): %s", url, e)
            attempts.append(MirrorAttempt(mirror, url, e))
            (root / archive).unlink(missing_ok=True)
            continue

        attempts.append(MirrorAttempt(mirror, url))
        return ResolveResult(archive, path, tuple(attempts))

    return ResolveResult(archive, None, tuple(attempts))

def ensure_raw_file(root         : str | Path,
                    file         : DatasetFile,
                    mirrors      : Sequence[str],
                    *,
                    fetcher      : Fetcher = fetch,
                    keep_archive : bool    = True,
                    ) -> bool:
    """Make sure the decompressed `file.raw` exists under `root`.

    Returns False without touching the network when it is already present,
    True after a successful download and extraction.
    """
    root = Path(root)
    raw_path = root / file.raw

    if raw_path.exists():
        logger.debug("%s already exists, skipping download", raw_path)
        return False

    result = download_archive(root, file.archive, mirrors, fetcher=fetcher)
    if not result.ok:
        raise DownloadExhaustedError(file.archive, result.attempts)

    assert result.path is not None
    extract(result.path, raw_path)

    if not keep_archive:
        result.path.unlink()

    return True
