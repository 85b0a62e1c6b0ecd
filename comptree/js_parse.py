from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Dict, Iterator, Optional

from tree_sitter import Node, Parser, Tree
from tree_sitter_language_pack import get_language

from .model import ExportMap, ImportDeclaration

logger = logging.getLogger(__name__)


class JsParseError(ValueError):
	pass


@dataclass
class ModuleAst:
	tree: Tree
	path: Optional[str] = None

	@property
	def root(self) -> Node:
		return self.tree.root_node


@lru_cache(maxsize=1)
def _parser() -> Parser:
	return Parser(get_language("javascript"))


def _text(node: Node) -> str:
	return node.text.decode("utf-8")


def _string_value(node: Node) -> str:
	# 'a' / "a" including quotes
	return _text(node)[1:-1]


def _first_error(node: Node) -> Optional[Node]:
	if node.type == "ERROR" or node.is_missing:
		return node
	for child in node.children:
		if child.has_error:
			found = _first_error(child)
			if found is not None:
				return found
	return None


def parse(text: str, path: Optional[str] = None) -> ModuleAst:
	tree = _parser().parse(text.encode("utf-8"))
	if tree.root_node.has_error:
		error = _first_error(tree.root_node) or tree.root_node
		line, column = error.start_point
		raise JsParseError(f"Syntax error in {path or '<source>'} at {line + 1}:{column + 1}")
	return ModuleAst(tree=tree, path=path)


def _import_clause_declarations(clause: Node, source: str) -> Iterator[ImportDeclaration]:
	for child in clause.named_children:
		if child.type == "identifier":
			yield ImportDeclaration(identifier=_text(child), source=source)
		elif child.type == "namespace_import":
			for name in child.named_children:
				if name.type == "identifier":
					yield ImportDeclaration(identifier=_text(name), source=source, member="*")
		elif child.type == "named_imports":
			for spec in child.named_children:
				if spec.type != "import_specifier":
					continue
				name = spec.child_by_field_name("name")
				alias = spec.child_by_field_name("alias")
				member = _string_value(name) if name.type == "string" else _text(name)
				yield ImportDeclaration(
					identifier=_text(alias or name),
					source=source,
					member=None if member == "default" else member,
				)


def get_imports_object(ast: ModuleAst) -> Dict[str, ImportDeclaration]:
	imports: Dict[str, ImportDeclaration] = {}
	for statement in ast.root.named_children:
		if statement.type != "import_statement":
			continue
		source_node = statement.child_by_field_name("source")
		if source_node is None:
			continue
		source = _string_value(source_node)
		for clause in statement.named_children:
			if clause.type != "import_clause":
				continue
			for decl in _import_clause_declarations(clause, source):
				imports[decl.identifier] = decl
	return imports


def _default_export_value(statement: Node) -> Optional[Node]:
	if statement.type == "export_statement":
		if any(child.type == "default" for child in statement.children):
			return statement.child_by_field_name("value")
	elif statement.type == "expression_statement" and statement.named_children:
		# module.exports = {...}
		expression = statement.named_children[0]
		if expression.type == "assignment_expression":
			left = expression.child_by_field_name("left")
			if left is not None and _text(left).replace(" ", "") == "module.exports":
				return expression.child_by_field_name("right")
	return None


def _bound_object(root: Node, name: str) -> Optional[Node]:
	for statement in root.named_children:
		if statement.type not in ("lexical_declaration", "variable_declaration"):
			continue
		for declarator in statement.named_children:
			if declarator.type != "variable_declarator":
				continue
			ident = declarator.child_by_field_name("name")
			value = declarator.child_by_field_name("value")
			if ident is not None and _text(ident) == name and value is not None and value.type == "object":
				return value
	return None


def find_exports_node(ast: ModuleAst) -> Optional[Node]:
	"""The object literal a file exports by default, following `export default name;`."""
	for statement in ast.root.named_children:
		value = _default_export_value(statement)
		if value is None:
			continue
		if value.type == "object":
			return value
		if value.type == "identifier":
			return _bound_object(ast.root, _text(value))
		return None
	return None


def _property_key(key: Node) -> Optional[str]:
	if key.type == "string":
		return _string_value(key)
	if key.type in ("property_identifier", "number"):
		return _text(key)
	# computed keys are not resolvable statically
	return None


def _export_value(value: Node) -> Any:
	if value.type == "object":
		return _object_entries(value)
	if value.type in ("identifier", "member_expression"):
		return _text(value)
	return None


def _object_entries(node: Node) -> Dict[str, Any]:
	entries: Dict[str, Any] = {}
	for child in node.named_children:
		if child.type == "shorthand_property_identifier":
			name = _text(child)
			entries[name] = name
		elif child.type == "pair":
			key = _property_key(child.child_by_field_name("key"))
			if key is not None:
				entries[key] = _export_value(child.child_by_field_name("value"))
		elif child.type == "spread_element":
			logger.warning("Spread entries in export objects are ignored")
		elif child.type == "method_definition":
			name = child.child_by_field_name("name")
			key = _property_key(name) if name is not None else None
			if key is not None:
				entries[key] = None
	return entries


def get_export_object(node: Optional[Node]) -> ExportMap:
	if node is None or node.type != "object":
		raise JsParseError("No default export object found")
	return _object_entries(node)
