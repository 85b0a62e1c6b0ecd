"""Resolves the tree of UI components re-exported from a JavaScript index file.

Modules:
- js_parse.py: Import declarations and default-export object extraction.
- fs.py: Async file reads, directory listing and import path repair.
- resolve.py: Classification of a single import by its source path.
- registry.py: Index file to unfulfilled component/module references.
- defaults.py: Default payload loading with fallback, html component scan.
- tree.py: Phased tree build with per-entry failure isolation.
- model.py: Data structures for references, descriptors and the tree.
- summarize.py: Deterministic textual summary of a built tree.
"""

from .config import TreeConfig
from .model import BuildResult, ComponentTree
from .tree import TreeOrchestrator, build_component_tree

__all__ = [
	"TreeConfig",
	"BuildResult",
	"ComponentTree",
	"TreeOrchestrator",
	"build_component_tree",
]
