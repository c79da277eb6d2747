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

from pathlib import Path
import gzip

import pytest

import numpy as _np

import idxdata as idx

MIRRORS = ("https://primary.example.com/mnist/", "https://backup.example.com/mnist/")

def make_images(n: int, rows: int = 3, cols: int = 2, seed: int = 0) -> list[idx.RawImage]:
    rng = _np.random.default_rng(seed)
    return [idx.RawImage(rows=rows, cols=cols, pixels=rng.integers(0, 256, size=rows * cols, dtype=_np.uint8).tobytes())
            for _ in range(n)]

def make_payloads(config: idx.DatasetConfig) -> dict[str, bytes]:
    return {
        config.train_images.raw : idx.encode_images(make_images(4, seed=1)),
        config.train_labels.raw : idx.encode_labels([0, 1, 2, 1]),
        config.test_images.raw  : idx.encode_images(make_images(2, seed=2)),
        config.test_labels.raw  : idx.encode_labels([9, 0]),
    }

def write_raw_files(root: Path, config: idx.DatasetConfig = idx.MNIST) -> dict[str, bytes]:
    payloads = make_payloads(config)
    for name, payload in payloads.items():
        (root / name).write_bytes(payload)
    return payloads

def test_load(tmp_path: Path) -> None:
    write_raw_files(tmp_path)

    dataset = idx.load(tmp_path)

    assert len(dataset.train_images) == len(dataset.train_labels) == 4
    assert len(dataset.test_images) == len(dataset.test_labels) == 2
    assert dataset.train_labels == (0, 1, 2, 1)
    assert dataset.test_labels == (9, 0)
    assert list(dataset.train_images) == make_images(4, seed=1)
    assert list(dataset.test_images) == make_images(2, seed=2)
    assert dataset.num_classes == 4

    images, labels = dataset.test
    assert images[1].shape == (3, 2)
    assert labels[1] == 0

    assert idx.Dataset.load(tmp_path) == dataset

def test_load_to_numpy(tmp_path: Path) -> None:
    write_raw_files(tmp_path)

    arrays = idx.load(tmp_path).to_numpy()

    assert arrays["train_images"].shape == (4, 3, 2)
    assert arrays["train_images"].dtype == _np.uint8
    assert arrays["test_images"].shape == (2, 3, 2)
    assert arrays["train_labels"].tolist() == [0, 1, 2, 1]
    assert arrays["test_labels"].dtype == _np.uint8
    assert _np.array_equal(arrays["train_images"][2], make_images(4, seed=1)[2].to_array())

def test_load_not_found(tmp_path: Path) -> None:
    with pytest.raises(idx.DatasetNotFoundError) as exc_info:
        idx.load(tmp_path)

    assert exc_info.value.root == str(tmp_path)
    assert "download=True" in str(exc_info.value)

    write_raw_files(tmp_path)
    (tmp_path / idx.MNIST.test_labels.raw).unlink()

    with pytest.raises(idx.DatasetNotFoundError) as exc_info:
        idx.load(tmp_path)
    assert exc_info.value.filename == idx.MNIST.test_labels.raw

def test_load_format_error(tmp_path: Path) -> None:
    write_raw_files(tmp_path)
    (tmp_path / idx.MNIST.test_labels.raw).write_bytes(bytes.fromhex("00000800 00000002 0900"))

    with pytest.raises(idx.FormatError, match="magic"):
        idx.load(tmp_path)

def test_load_mismatched_split(tmp_path: Path) -> None:
    write_raw_files(tmp_path)
    (tmp_path / idx.MNIST.train_labels.raw).write_bytes(idx.encode_labels([0, 1, 2]))

    with pytest.raises(idx.FormatError, match="train split"):
        idx.load(tmp_path)

def test_load_download(tmp_path: Path) -> None:
    config = idx.MNIST.with_mirrors(*MIRRORS)
    payloads = make_payloads(config)
    requested: list[str] = []

    def fetcher(url: str, destination_dir: Path, filename: str) -> Path:
        requested.append(url)
        if url.startswith(MIRRORS[0]):
            raise idx.NetworkError(url, "connection refused")
        raw = next(f.raw for f in config.files if f.archive == filename)
        path = Path(destination_dir) / filename
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(gzip.compress(payloads[raw]))
        return path

    root = tmp_path / "data"
    dataset = idx.load(root, download=True, config=config, fetcher=fetcher)

    assert dataset.train_labels == (0, 1, 2, 1)
    assert requested == [m + f.archive for f in config.files for m in MIRRORS]
    for f in config.files:
        assert (root / f.raw).read_bytes() == payloads[f.raw]

    requested.clear()
    assert idx.load(root, download=True, config=config, fetcher=fetcher) == dataset
    assert requested == []

def test_load_download_exhausted(tmp_path: Path) -> None:
    config = idx.MNIST.with_mirrors(*MIRRORS)

    def fetcher(url: str, destination_dir: Path, filename: str) -> Path:
        raise idx.NetworkError(url, "404 Client Error")

    with pytest.raises(idx.DownloadExhaustedError) as exc_info:
        idx.load(tmp_path, download=True, config=config, fetcher=fetcher)

    assert exc_info.value.archive == config.train_images.archive
    assert len(exc_info.value.attempts) == 2

def test_dataset_config() -> None:
    assert idx.MNIST.mirrors == ("http://yann.lecun.com/exdb/mnist/",
                                 "https://ossci-datasets.s3.amazonaws.com/mnist/")
    assert [f.raw for f in idx.MNIST.files] == ["train-images.idx3-ubyte",
                                               "train-labels.idx1-ubyte",
                                               "t10k-images.idx3-ubyte",
                                               "t10k-labels.idx1-ubyte"]

    config = idx.MNIST.with_mirrors("https://a/", "https://b/")
    assert config.mirrors == ("https://a/", "https://b/")
    assert config.files == idx.MNIST.files
    assert idx.MNIST.mirrors[0] == "http://yann.lecun.com/exdb/mnist/"

    with pytest.raises(ValueError):
        idx.MNIST.with_mirrors()

    with pytest.raises(ValueError):
        idx.DatasetConfig(name="broken", mirrors=(), files=idx.MNIST.files[:2])
