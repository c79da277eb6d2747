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
from collections import Counter
from typing import Sequence
import argparse
import logging
import sys

from .config import MNIST
from .dataset import load
from .idx import RawImage
from .mirror import ensure_raw_file
from .util import IdxDataError

_SHADES = " .:-=+*#%@"

def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m idxdata",
        description="Download and inspect the MNIST dataset.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    subparsers = parser.add_subparsers(dest="command")
    subparsers.required = True

    download_parser = subparsers.add_parser(
        "download",
        help="Download and extract any dataset file missing under ROOT.",
    )
    download_parser.add_argument("root", help="Directory holding the dataset files.")
    download_parser.add_argument(
        "--mirror",
        action="append",
        default=None,
        help="Mirror base URL to use instead of the defaults. May be repeated.",
    )
    download_parser.set_defaults(func=_handle_download)

    info_parser = subparsers.add_parser(
        "info",
        help="Print split sizes, image shape and label counts.",
    )
    info_parser.add_argument("root", help="Directory holding the dataset files.")
    info_parser.add_argument("--download", action="store_true", help="Download missing files first.")
    info_parser.set_defaults(func=_handle_info)

    show_parser = subparsers.add_parser(
        "show",
        help="Print one image as ASCII art together with its label.",
    )
    show_parser.add_argument("root", help="Directory holding the dataset files.")
    show_parser.add_argument("index", type=int, help="Index of the image within the split.")
    show_parser.add_argument("--split", choices=["train", "test"], default="train")
    show_parser.add_argument("--download", action="store_true", help="Download missing files first.")
    show_parser.set_defaults(func=_handle_show)

    return parser

def _handle_download(args: argparse.Namespace) -> None:
    config = MNIST if args.mirror is None else MNIST.with_mirrors(*args.mirror)
    for file in config.files:
        if not ensure_raw_file(args.root, file, config.mirrors):
            print(f"{file.raw} already exists")

def _handle_info(args: argparse.Namespace) -> None:
    dataset = load(args.root, args.download)
    for split in ("train", "test"):
        images, labels = getattr(dataset, split)
        shape = "x".join(map(str, images[0].shape)) if len(images) > 0 else "-"
        counts = Counter(labels)
        print(f"{split}: {len(labels)} images of {shape}")
        print("  " + " ".join(f"{label}:{counts[label]}" for label in sorted(counts)))
    print(f"classes: {dataset.num_classes}")

def render_ascii(image: RawImage) -> str:
    arr = image.to_array()
    rows = ["".join(_SHADES[int(v) * len(_SHADES) // 256] for v in row) for row in arr]
    return "\n".join(rows)

def _handle_show(args: argparse.Namespace) -> None:
    dataset = load(args.root, args.download)
    images, labels = getattr(dataset, args.split)
    if not 0 <= args.index < len(images):
        raise IndexError(f"Index {args.index} is out of range for the {args.split} split ({len(images)} images).")
    print(f"label: {labels[args.index]}")
    print(render_ascii(images[args.index]))

def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(levelname)s %(name)s: %(message)s")
    handler = getattr(args, "func")
    try:
        handler(args)
    except (IdxDataError, OSError, IndexError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
