from __future__ import annotations

from typing import List

from .model import BuildResult, ComponentDescriptor, ComponentTree


def summarize_component(c: ComponentDescriptor, indent: str = "  ") -> str:
	return f"{indent}{c.name} [{c.kind.value}] {c.import_path} ({len(c.defaults)} defaults)"


def summarize_tree(tree: ComponentTree) -> str:
	parts: List[str] = []
	parts.append(f"Components: {len(tree.components)}")
	for c in tree.components.values():
		parts.append(summarize_component(c))
	parts.append(f"Modules: {len(tree.modules)}")
	for m in tree.modules.values():
		parts.append(f"  {m.name} at {m.import_path}: {len(m.components)} components")
		for c in m.components.values():
			parts.append(summarize_component(c, indent="    "))
	parts.append(f"Html components: {len(tree.html_components)}")
	return "\n".join(parts)


def summarize_result(result: BuildResult) -> str:
	parts = [summarize_tree(result.tree)]
	if result.diagnostics:
		parts.append(f"Diagnostics: {len(result.diagnostics)}")
		for d in result.diagnostics:
			parts.append(f"  {d.severity} {d.scope}: {d.message}")
	return "\n".join(parts)
