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

import argparse
import logging
from pathlib import Path

import numpy as np

import idxdata

def main() -> None:
    p = argparse.ArgumentParser(description="Download MNIST and save train/test as NumPy arrays.")
    p.add_argument("--raw-dir", type=Path, default=Path("data/mnist/raw"))
    p.add_argument("--out-dir", type=Path, default=Path("data/mnist"))
    p.add_argument("--mirror", action="append", default=None)
    args = p.parse_args()

    logging.basicConfig(level=logging.INFO)

    config = idxdata.MNIST if args.mirror is None else idxdata.MNIST.with_mirrors(*args.mirror)
    arrays = idxdata.load(args.raw_dir, download=True, config=config).to_numpy()

    args.out_dir.mkdir(parents=True, exist_ok=True)
    train_path = args.out_dir / "train.npz"
    test_path = args.out_dir / "test.npz"
    np.savez_compressed(train_path, x=arrays["train_images"], y=arrays["train_labels"])
    np.savez_compressed(test_path, x=arrays["test_images"], y=arrays["test_labels"])
    print(f"Saved: {train_path}")
    print(f"Saved: {test_path}")

if __name__ == "__main__":
    main()
