from __future__ import annotations

import logging
import os
from typing import Dict, Optional

from .config import INDEX_FILE_NAME, TreeConfig
from .defaults import DefaultsLoader, HtmlComponentScanner
from .diagnostics import Diagnostics
from .errors import ComponentStructureError, ModuleStructureError, NestedExportWarning
from .model import BuildResult, ComponentDescriptor, ComponentTree, ModuleDescriptor
from .registry import ImportRegistryBuilder

logger = logging.getLogger(__name__)


class TreeOrchestrator:
	"""Builds a ComponentTree in sequential phases.

	1. root resolution: the configured index file; a FatalReadError here aborts
	2. component validation: each root component gets its defaults or is dropped
	3. module expansion: each module's own index.js, validated the same way
	4. html merge: built-in html component defaults

	Every phase returns a new tree value. Entries are processed one at a time
	in insertion order so diagnostics come out in a reproducible order.
	"""

	def __init__(self, config: TreeConfig) -> None:
		self.config = config
		self.registry = ImportRegistryBuilder(config)
		self.defaults = DefaultsLoader(config)
		self.html = HtmlComponentScanner(config)

	async def build(self) -> BuildResult:
		diagnostics = Diagnostics()
		tree = await self._resolve_root(diagnostics)
		tree = await self._validate_root_components(tree, diagnostics)
		tree = await self._expand_modules(tree, diagnostics)
		tree = await self._merge_html(tree)
		return BuildResult(tree=tree, diagnostics=list(diagnostics.items))

	async def _resolve_root(self, diagnostics: Diagnostics) -> ComponentTree:
		refs = await self.registry.build_from_file(self.config.index_path, diagnostics=diagnostics)
		return ComponentTree(components=refs.components, modules=refs.modules)

	async def _validate_components(
		self,
		components: Dict[str, ComponentDescriptor],
		diagnostics: Diagnostics,
		module: Optional[ModuleDescriptor] = None,
	) -> Dict[str, ComponentDescriptor]:
		validated: Dict[str, ComponentDescriptor] = {}
		for name, descriptor in components.items():
			scope = f"{module.name}.{name}" if module is not None else name
			try:
				validated[name] = await self.defaults.fulfill(descriptor, module, diagnostics)
			except Exception as e:
				diagnostics.report(ComponentStructureError(f"Invalid component structure: {name}: {e}"), scope)
		return validated

	async def _validate_root_components(self, tree: ComponentTree, diagnostics: Diagnostics) -> ComponentTree:
		components = await self._validate_components(tree.components, diagnostics)
		return tree.model_copy(update={"components": components})

	async def _expand_module(self, module: ModuleDescriptor, diagnostics: Diagnostics) -> ModuleDescriptor:
		index_path = os.path.join(module.absolute_path, INDEX_FILE_NAME)
		refs = await self.registry.build_from_file(index_path, module, diagnostics)
		for nested in refs.modules:
			diagnostics.report(
				NestedExportWarning(f"Modules inside a module are not expanded: {nested}"),
				f"{module.name}.{nested}",
			)
		components = await self._validate_components(refs.components, diagnostics, module)
		return module.model_copy(update={"components": components})

	async def _expand_modules(self, tree: ComponentTree, diagnostics: Diagnostics) -> ComponentTree:
		modules: Dict[str, ModuleDescriptor] = {}
		for name, module in tree.modules.items():
			if not module.absolute_path:
				logger.debug("Not expanding module %s without an absolute path", name)
				modules[name] = module
				continue
			try:
				modules[name] = await self._expand_module(module, diagnostics)
			except Exception as e:
				diagnostics.report(ModuleStructureError(f"Invalid module structure: {name}: {e}"), name)
		return tree.model_copy(update={"modules": modules})

	async def _merge_html(self, tree: ComponentTree) -> ComponentTree:
		html_components = await self.html.scan()
		return tree.model_copy(update={"html_components": html_components})


async def build_component_tree(config: TreeConfig) -> BuildResult:
	return await TreeOrchestrator(config).build()
