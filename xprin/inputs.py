"""Copying test inputs into a per-run inputs directory."""

from __future__ import annotations

import os
import shutil
import sys


def _base(path: str) -> str:
    stripped = path.rstrip("/")
    if not stripped:
        return "/" if path else "."
    return stripped.rsplit("/", 1)[-1]


def _ext(base: str) -> str:
    index = base.rfind(".")
    return base[index:] if index >= 0 else ""


def unique_base_names_for_paths(paths: list[str] | None) -> list[str] | None:
    """Give every path a distinct base name, suffixing repeats with _1, _2, ...

    Order and length follow ``paths``; None gives None.
    """
    if paths is None:
        return None

    counts: dict[str, int] = {}
    names = []
    for path in paths:
        base = _base(path)
        ext = _ext(base)
        stem = base[: len(base) - len(ext)] if ext else base
        seen = counts.get(stem, 0)
        counts[stem] = seen + 1
        names.append(f"{stem}_{seen}{ext}" if seen > 0 else base)
    return names


def _copy(src: str, dest: str) -> None:
    if os.path.isdir(src):
        shutil.copytree(src, dest, dirs_exist_ok=True)
    else:
        shutil.copy(src, dest)


class InputCopier:
    """Copies files and directories into an inputs directory, grouped by type."""

    def __init__(self, inputs_dir: str | os.PathLike[str], debug: bool = False) -> None:
        self.inputs_dir = os.fspath(inputs_dir)
        self.debug = debug

    def copy_input(self, src: str | os.PathLike[str], input_type: str) -> str:
        """Copy ``src`` into ``<inputs_dir>/<input_type>/`` and return the new path."""
        src = os.fspath(src)
        type_dir = os.path.join(self.inputs_dir, input_type)
        try:
            os.makedirs(type_dir, mode=0o750, exist_ok=True)
        except OSError as exc:
            raise OSError(f"failed to create {input_type} directory: {exc}") from exc

        dest = os.path.join(type_dir, _base(src))
        try:
            _copy(src, dest)
        except OSError as exc:
            raise OSError(f"failed to copy {input_type}: {exc}") from exc

        if self.debug:
            print(f"Copied {input_type} to: {dest}", file=sys.stderr)
        return dest

    def copy_to_path(self, src: str | os.PathLike[str], dest: str | os.PathLike[str]) -> str:
        """Copy ``src`` to exactly ``dest``, creating parent directories."""
        src = os.fspath(src)
        dest = os.fspath(dest)
        try:
            os.makedirs(os.path.dirname(dest) or ".", mode=0o750, exist_ok=True)
        except OSError as exc:
            raise OSError(f"failed to create directory for {dest}: {exc}") from exc

        try:
            _copy(src, dest)
        except OSError as exc:
            raise OSError(f"failed to copy to {dest}: {exc}") from exc

        if self.debug:
            print(f"Copied to: {dest}", file=sys.stderr)
        return dest