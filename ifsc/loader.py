"""
Dataset loaders.

A loader is anything callable as `loader(logical_name) -> bytes` that raises
when the dataset cannot be produced. The index builder only depends on that
contract, so datasets can come from a directory, package data, or memory.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Mapping, Union


DatasetLoader = Callable[[str], bytes]


class DirectoryDatasetLoader:
    """Reads `<root>/<logical_name>` from the file system."""

    def __init__(self, root: Union[str, Path]) -> None:
        self._root = Path(root)

    def __call__(self, name: str) -> bytes:
        path = self._root / name
        if not path.is_file():
            raise FileNotFoundError(f"Dataset not found: {path}")
        return path.read_bytes()

    def __repr__(self) -> str:
        return f"DirectoryDatasetLoader({str(self._root)!r})"


class MappingDatasetLoader:
    """Serves datasets from an in-memory mapping of name -> bytes or str."""

    def __init__(self, payloads: Mapping[str, Union[bytes, str]]) -> None:
        self._payloads = dict(payloads)

    def __call__(self, name: str) -> bytes:
        if name not in self._payloads:
            raise KeyError(f"Dataset not found: {name}")
        payload = self._payloads[name]
        if isinstance(payload, str):
            return payload.encode("utf-8")
        return payload
