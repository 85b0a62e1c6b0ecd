from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, computed_field
from pydantic.alias_generators import to_camel


class _TreeModel(BaseModel):
	model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class ImportDeclaration(BaseModel):
	identifier: str
	source: str
	member: Optional[str] = None


# Exported name -> identifier reference, nested mapping (unsupported) or None
ExportValue = Union[str, Dict[str, Any], None]
ExportMap = Dict[str, ExportValue]


class ReferenceKind(str, Enum):
	COMPONENT = "component"
	CONTAINER = "container"
	MODULE = "module"
	LIB_MEMBER = "lib_member"


class ResolvedReference(BaseModel):
	kind: Optional[ReferenceKind] = None
	import_path: str
	absolute_path: Optional[str] = None


class ComponentDescriptor(_TreeModel):
	name: str
	import_path: str
	absolute_path: Optional[str] = None
	kind: ReferenceKind = ReferenceKind.COMPONENT
	defaults: List[Dict[str, Any]] = []

	@computed_field(alias="isContainer")
	@property
	def is_container(self) -> bool:
		return self.kind is ReferenceKind.CONTAINER

	@computed_field(alias="isLibMember")
	@property
	def is_lib_member(self) -> bool:
		return self.kind is ReferenceKind.LIB_MEMBER


class ModuleDescriptor(_TreeModel):
	name: str
	import_path: str
	absolute_path: Optional[str] = None
	components: Dict[str, ComponentDescriptor] = {}


class HtmlComponentDescriptor(_TreeModel):
	name: str
	defaults: List[Dict[str, Any]] = []


class IndexRefs(_TreeModel):
	"""Unfulfilled references collected from a single index file."""

	components: Dict[str, ComponentDescriptor] = {}
	modules: Dict[str, ModuleDescriptor] = {}


class ComponentTree(_TreeModel):
	components: Dict[str, ComponentDescriptor] = {}
	modules: Dict[str, ModuleDescriptor] = {}
	html_components: Dict[str, HtmlComponentDescriptor] = {}


Severity = Literal["error", "warning", "info"]


class Diagnostic(_TreeModel):
	severity: Severity
	scope: str
	message: str
	code: str


class BuildResult(_TreeModel):
	tree: ComponentTree
	diagnostics: List[Diagnostic] = []
