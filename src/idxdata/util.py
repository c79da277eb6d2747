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
from typing import Sequence, TYPE_CHECKING

if TYPE_CHECKING:
    from .mirror import MirrorAttempt

class IdxDataError(Exception):
    pass

class FormatError(IdxDataError, ValueError):
    pass

class NetworkError(IdxDataError):
    def __init__(self, url: str, reason: str):
        super().__init__(f"Failed to fetch {url}: {reason}")
        self.url    = url
        self.reason = reason

class DownloadExhaustedError(IdxDataError):
    def __init__(self, archive: str, attempts: Sequence[MirrorAttempt]):
        lines = [f"Failed to download {archive} from all mirrors."]
        lines += [f"  {a.url}: {a.error}" for a in attempts]
        super().__init__("\n".join(lines))
        self.archive  = archive
        self.attempts = tuple(attempts)

class ExtractionError(IdxDataError, OSError):
    pass

class DatasetNotFoundError(IdxDataError, FileNotFoundError):
    def __init__(self, root: str, filename: str):
        super().__init__(f"Dataset file '{filename}' was not found in \"{root}\". "
                         "Load with download=True to fetch it.")
        self.root     = root
        self.filename = filename
