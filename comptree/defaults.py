from __future__ import annotations

import json
import logging
import os
from typing import Any, Dict, List, Optional

from . import fs
from .config import HTML_DEFAULTS_DIR_NAME, INDEX_FILE_NAME, TreeConfig
from .diagnostics import Diagnostics
from .errors import ComponentStructureError, DefaultsNotFoundError, MissingEntryFileNotice
from .model import ComponentDescriptor, HtmlComponentDescriptor, ModuleDescriptor, ReferenceKind

logger = logging.getLogger(__name__)

REDUCER_FILE_NAME = "reducer.js"
JSON_SUFFIX = ".json"


def default_payload(name: str, namespace: Optional[str] = None) -> Dict[str, Any]:
	payload: Dict[str, Any] = {"type": name, "variant": "default", "children": []}
	if namespace:
		payload["namespace"] = namespace
	return payload


async def _load_defaults(file_path: str) -> List[Dict[str, Any]]:
	try:
		defaults = await fs.read_json(file_path)
	except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
		raise DefaultsNotFoundError(f"Defaults not found: {file_path}") from e
	if not isinstance(defaults, list) or not defaults:
		raise DefaultsNotFoundError(f"Defaults not found: {file_path}")
	if not all(isinstance(item, dict) for item in defaults):
		raise DefaultsNotFoundError(f"Defaults are not a list of objects: {file_path}")
	return defaults


async def load_defaults_or_fallback(
	file_path: str, name: str, namespace: Optional[str] = None
) -> List[Dict[str, Any]]:
	"""Load a defaults file, synthesizing a single minimal payload when there is none."""
	try:
		return await _load_defaults(file_path)
	except DefaultsNotFoundError as e:
		logger.debug("%s, using synthesized default for %s", e, name)
		return [default_payload(name, namespace)]


class DefaultsLoader:
	def __init__(self, config: TreeConfig) -> None:
		self.config = config

	def defaults_file_path(self, name: str, module: Optional[ModuleDescriptor] = None) -> str:
		if module is not None and module.name:
			return os.path.join(self.config.defaults_path, module.name, f"{name}{JSON_SUFFIX}")
		return os.path.join(self.config.defaults_path, f"{name}{JSON_SUFFIX}")

	async def fulfill(
		self,
		descriptor: ComponentDescriptor,
		module: Optional[ModuleDescriptor] = None,
		diagnostics: Optional[Diagnostics] = None,
	) -> ComponentDescriptor:
		if diagnostics is None:
			diagnostics = Diagnostics()
		namespace = module.name if module is not None else None
		defaults = await load_defaults_or_fallback(
			self.defaults_file_path(descriptor.name, module), descriptor.name, namespace
		)
		result = descriptor.model_copy(update={"defaults": defaults})
		if descriptor.kind is not ReferenceKind.LIB_MEMBER and descriptor.absolute_path:
			await self._verify_structure(result, namespace, diagnostics)
		return result

	async def _verify_structure(
		self,
		descriptor: ComponentDescriptor,
		namespace: Optional[str],
		diagnostics: Diagnostics,
	) -> None:
		required = [os.path.join(descriptor.absolute_path, INDEX_FILE_NAME)]
		if descriptor.kind is ReferenceKind.CONTAINER:
			required.append(os.path.join(descriptor.absolute_path, REDUCER_FILE_NAME))
		scope = f"{namespace}.{descriptor.name}" if namespace else descriptor.name
		for file_path in required:
			if await fs.is_existing(file_path):
				continue
			message = f"Missing file {file_path}"
			if self.config.strict_structure:
				raise ComponentStructureError(message)
			diagnostics.report(MissingEntryFileNotice(message), scope)


class HtmlComponentScanner:
	"""Loads the built-in html component defaults in file-name order."""

	def __init__(self, config: TreeConfig) -> None:
		self.config = config

	async def scan(self) -> Dict[str, HtmlComponentDescriptor]:
		result: Dict[str, HtmlComponentDescriptor] = {}
		files = await fs.read_directory_flat(self.config.html_defaults_path)
		if not files:
			return result
		for entry in sorted(files, key=lambda f: f.name):
			name = entry.name[: -len(JSON_SUFFIX)] if entry.name.endswith(JSON_SUFFIX) else entry.name
			defaults = await load_defaults_or_fallback(entry.path, name, HTML_DEFAULTS_DIR_NAME)
			result[name] = HtmlComponentDescriptor(name=name, defaults=defaults)
		return result
