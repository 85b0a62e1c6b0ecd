from __future__ import annotations

import asyncio
import json
import os
import posixpath
import re
from typing import Any, List, Optional

from pydantic import BaseModel


class FileEntry(BaseModel):
	name: str
	path: str


_DUPLICATE_SEPARATORS = re.compile(r"/{2,}")


def repair_path(source: str) -> str:
	"""Normalize an import source: forward slashes, no empty or `..` segments, `./` kept."""
	if not source:
		return source
	text = _DUPLICATE_SEPARATORS.sub("/", source.replace("\\", "/"))
	relative = text.startswith("./")
	normalized = posixpath.normpath(text)
	if normalized == ".":
		return normalized
	if relative and not normalized.startswith((".", "/")):
		normalized = "./" + normalized
	return normalized


def _read_text(path: str) -> str:
	with open(path, "r", encoding="utf-8") as fh:
		return fh.read()


def _list_files(dir_path: str) -> Optional[List[FileEntry]]:
	if not os.path.isdir(dir_path):
		return None
	entries: List[FileEntry] = []
	with os.scandir(dir_path) as it:
		for entry in it:
			if entry.is_file():
				entries.append(FileEntry(name=entry.name, path=entry.path))
	return entries


async def read_file(path: str) -> str:
	return await asyncio.to_thread(_read_text, path)


async def read_json(path: str) -> Any:
	text = await read_file(path)
	return json.loads(text)


async def read_directory_flat(dir_path: str) -> Optional[List[FileEntry]]:
	"""List the files directly inside `dir_path`, or None when it does not exist."""
	return await asyncio.to_thread(_list_files, dir_path)


async def is_existing(path: str) -> bool:
	return await asyncio.to_thread(os.path.exists, path)
