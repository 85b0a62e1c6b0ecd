from __future__ import annotations

import logging
from typing import Dict, Optional

from . import fs, js_parse
from .config import TreeConfig
from .diagnostics import Diagnostics
from .errors import (
	FatalReadError,
	NestedExportWarning,
	UnclassifiedReferenceError,
	UnresolvedImportError,
)
from .model import (
	ComponentDescriptor,
	ImportDeclaration,
	IndexRefs,
	ModuleDescriptor,
	ReferenceKind,
)
from .resolve import resolve_import

logger = logging.getLogger(__name__)


def _repair_imports(imports: Dict[str, ImportDeclaration]) -> Dict[str, ImportDeclaration]:
	return {
		identifier: decl.model_copy(update={"source": fs.repair_path(decl.source)})
		for identifier, decl in imports.items()
	}


class ImportRegistryBuilder:
	"""Turns the export mapping of one index file into unfulfilled tree entries."""

	def __init__(self, config: TreeConfig) -> None:
		self.config = config

	async def build_from_file(
		self,
		file_path: str,
		module: Optional[ModuleDescriptor] = None,
		diagnostics: Optional[Diagnostics] = None,
	) -> IndexRefs:
		if diagnostics is None:
			diagnostics = Diagnostics()
		try:
			text = await fs.read_file(file_path)
			ast = js_parse.parse(text, path=file_path)
			imports = js_parse.get_imports_object(ast)
			exports = js_parse.get_export_object(js_parse.find_exports_node(ast))
		except (OSError, UnicodeDecodeError, js_parse.JsParseError) as e:
			raise FatalReadError(f"Cannot read index file {file_path}: {e}") from e

		imports = _repair_imports(imports)
		module_import_path = module.import_path if module else None
		components: Dict[str, ComponentDescriptor] = {}
		modules: Dict[str, ModuleDescriptor] = {}

		for name, value in exports.items():
			scope = f"{file_path}:{name}"
			if isinstance(value, dict):
				diagnostics.report(
					NestedExportWarning(f"Components index can not include nested object references: {name}"),
					scope,
				)
				continue
			import_decl = imports.get(value) if isinstance(value, str) else None
			if import_decl is None:
				reason = "reference without import" if isinstance(value, str) else "wrong reference definition"
				diagnostics.report(UnresolvedImportError(f"Components index includes {reason}: {name}"), scope)
				continue
			resolved = resolve_import(import_decl, self.config, module_import_path)
			if resolved is None:
				diagnostics.report(
					UnresolvedImportError(f"Components index includes wrong reference definition: {name}"),
					scope,
				)
				continue
			if resolved.kind is None:
				diagnostics.report(
					UnclassifiedReferenceError(f"Invalid component definition: {name} ({import_decl.source})"),
					scope,
				)
				continue

			if resolved.kind is ReferenceKind.MODULE:
				modules[name] = ModuleDescriptor(
					name=name,
					import_path=resolved.import_path,
					absolute_path=resolved.absolute_path,
				)
			else:
				components[name] = ComponentDescriptor(
					name=name,
					import_path=resolved.import_path,
					absolute_path=resolved.absolute_path,
					kind=resolved.kind,
				)

		logger.debug(
			"Resolved %d components and %d modules from %s", len(components), len(modules), file_path
		)
		return IndexRefs(components=components, modules=modules)
