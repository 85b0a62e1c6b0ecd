from __future__ import annotations


class ComponentTreeError(Exception):
	"""Base class for every condition reported while building a component tree."""

	severity = "error"


class FatalReadError(ComponentTreeError):
	"""An index file could not be read or parsed at all."""


class UnresolvedImportError(ComponentTreeError):
	"""An exported name has no usable import behind it."""


class UnclassifiedReferenceError(ComponentTreeError):
	"""An import resolved, but its path matches none of the known prefixes."""


class NestedExportWarning(ComponentTreeError):
	"""An export or module nests further than the tree follows; the entry is skipped."""

	severity = "warning"


class DefaultsNotFoundError(ComponentTreeError):
	"""Defaults file missing, invalid or empty. Always recovered by the loader."""


class ComponentStructureError(ComponentTreeError):
	"""A component could not be fulfilled and was removed from its tree level."""


class ModuleStructureError(ComponentTreeError):
	"""A module's own index could not be expanded; the whole module was removed."""


class MissingEntryFileNotice(ComponentTreeError):
	"""An expected entry or reducer file is absent. Advisory unless strict."""

	severity = "info"
