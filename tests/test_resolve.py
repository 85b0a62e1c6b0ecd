import os

from comptree.config import TreeConfig
from comptree.model import ImportDeclaration, ReferenceKind
from comptree.resolve import resolve_import


CONFIG = TreeConfig(app_dir="/app")


def _decl(source):
	return ImportDeclaration(identifier="X", source=source)


def test_relative_prefixes_classify_kind():
	component = resolve_import(_decl("./components/Button"), CONFIG)
	assert component.kind is ReferenceKind.COMPONENT
	# the kind directory stays in the import path; module index files are found through it
	assert component.import_path == "components/Button"
	assert component.absolute_path == os.path.join("/app", "components/Button")

	assert resolve_import(_decl("./containers/Panel"), CONFIG).kind is ReferenceKind.CONTAINER
	assert resolve_import(_decl("./modules/Nav"), CONFIG).kind is ReferenceKind.MODULE


def test_library_member_has_no_absolute_path():
	ref = resolve_import(_decl("lodash"), CONFIG)
	assert ref.kind is ReferenceKind.LIB_MEMBER
	assert ref.import_path == "lodash"
	assert ref.absolute_path is None

	scoped = resolve_import(_decl("@material-ui/core/Button"), CONFIG, "modules/Nav")
	assert scoped.kind is ReferenceKind.LIB_MEMBER
	assert scoped.import_path == "@material-ui/core/Button"


def test_paths_inside_module_are_joined_to_module_import_path():
	ref = resolve_import(_decl("./components/Item"), CONFIG, "modules/Nav")
	assert ref.kind is ReferenceKind.COMPONENT
	assert ref.import_path == "modules/Nav/components/Item"
	assert ref.absolute_path == os.path.join("/app", "modules/Nav/components/Item")

	bare = resolve_import(_decl("containers/List"), CONFIG, "modules/Nav")
	assert bare.kind is ReferenceKind.CONTAINER
	assert bare.import_path == "modules/Nav/containers/List"


def test_unknown_local_prefix_is_unclassified():
	ref = resolve_import(_decl("./utils/helpers"), CONFIG)
	assert ref is not None
	assert ref.kind is None
	assert ref.import_path == "utils/helpers"

	assert resolve_import(_decl("../shared/Button"), CONFIG).kind is None


def test_nothing_to_resolve():
	assert resolve_import(None, CONFIG) is None
	assert resolve_import(_decl(""), CONFIG) is None
