"""Checks that every image referenced by the README exists in the repository."""

from __future__ import annotations

import argparse
import re
import sys
from pathlib import Path
from typing import Iterable, Sequence

README_RELATIVE_PATH = Path("tokio-console", "README.md")

_IMAGE_PATTERN = re.compile(
    r"https://raw\.githubusercontent\.com/[\w.-]+/[\w.-]+/[\w.-]+/"
    r"(assets/[\w.-]+-[\d.]+/\w+\.png)"
)


class DocsImagesError(Exception):
    """The README's images could not be verified."""


def find_readme_images(lines: Iterable[str]) -> list[str]:
    """Repository-relative paths of the images referenced in `lines`, one per line at most."""
    images = []
    for line in lines:
        match = _IMAGE_PATTERN.search(line)
        if match:
            images.append(match.group(1))
    return images


def _read_lines(path: Path) -> Iterable[str]:
    with path.open("rb") as readme:
        for raw in readme:
            try:
                yield raw.decode("utf-8")
            except UnicodeDecodeError:
                return


def check_docs_images(base_dir: Path | str) -> list[str]:
    """Verify the README images exist under `base_dir` and return their paths."""
    base = Path(base_dir)
    readme_path = base / README_RELATIVE_PATH
    images = find_readme_images(_read_lines(readme_path))

    if not images:
        raise DocsImagesError(
            "No images found in README.md!\n\n"
            f"The README that was read is located at: {readme_path}\n\n"
            "This probably means that there is a problem with the image pattern."
        )

    missing = [image for image in images if not (base / image).exists()]
    if missing:
        listing = "".join(f" - {path}\n" for path in missing)
        raise DocsImagesError(f"README images missing:\n{listing}")

    print(
        f"OK: verified existence of image files in README, count: {len(images)}",
        file=sys.stderr,
    )
    return images


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Development tasks.")
    commands = parser.add_subparsers(dest="command", required=True)
    check = commands.add_parser(
        "check-docs-images", help="Check images needed for the documentation main page"
    )
    check.add_argument("--base-dir", default=".", help="repository root directory")
    args = parser.parse_args(argv)

    print("checking images for the documentation page...", file=sys.stderr)
    try:
        check_docs_images(args.base_dir)
    except (DocsImagesError, OSError) as err:
        print(f"error: {err}", file=sys.stderr)
        return 1
    return 0