from __future__ import annotations

import os
import posixpath
from typing import Dict, List, Optional

from .config import TreeConfig
from .model import ImportDeclaration, ReferenceKind, ResolvedReference


CURRENT_DIR_MARKER = "."

PREFIX_KINDS: Dict[str, ReferenceKind] = {
	"components": ReferenceKind.COMPONENT,
	"containers": ReferenceKind.CONTAINER,
	"modules": ReferenceKind.MODULE,
}


def _join_import_path(module_import_path: Optional[str], path: str) -> str:
	if module_import_path:
		return posixpath.join(module_import_path, path)
	return path


def resolve_import(
	import_decl: Optional[ImportDeclaration],
	config: TreeConfig,
	module_import_path: Optional[str] = None,
) -> Optional[ResolvedReference]:
	"""Classify an import by the first real segment of its source path.

	Returns None when there is nothing to resolve. A returned reference with
	``kind`` None points inside the project but under no known prefix.
	"""
	if import_decl is None or not import_decl.source:
		return None
	source = import_decl.source
	parts: List[str] = source.split("/")

	if parts[0] == CURRENT_DIR_MARKER and len(parts) > 1:
		import_path = _join_import_path(module_import_path, source[2:])
		return ResolvedReference(
			kind=PREFIX_KINDS.get(parts[1]),
			import_path=import_path,
			absolute_path=os.path.join(config.app_dir, import_path),
		)

	kind = PREFIX_KINDS.get(parts[0])
	if kind is None and not parts[0].startswith(CURRENT_DIR_MARKER):
		# external library references never map onto the local file system
		return ResolvedReference(kind=ReferenceKind.LIB_MEMBER, import_path=source)

	import_path = _join_import_path(module_import_path, source)
	return ResolvedReference(
		kind=kind,
		import_path=import_path,
		absolute_path=os.path.join(config.app_dir, import_path),
	)
