import os

import pytest

from comptree.config import TreeConfig
from comptree.diagnostics import Diagnostics
from comptree.errors import FatalReadError
from comptree.fs import repair_path
from comptree.model import ModuleDescriptor, ReferenceKind
from comptree.registry import ImportRegistryBuilder


ROOT_INDEX = """
import Button from './components/Button';
import Panel from './containers/Panel';
import Nav from './modules/Nav';
import { Grid } from 'react-bootstrap';
import helpers from './utils/helpers';

export default {
	Button,
	MainPanel: Panel,
	Nav,
	Grid,
	Helpers: helpers,
	Missing,
	Group: { Button },
	Computed: makeComponent(Button),
};
"""


@pytest.mark.asyncio
async def test_build_from_file_classifies_exports(write_files):
	root = write_files({"index.js": ROOT_INDEX})
	diagnostics = Diagnostics()
	builder = ImportRegistryBuilder(TreeConfig(app_dir=str(root)))
	refs = await builder.build_from_file(str(root / "index.js"), diagnostics=diagnostics)

	assert list(refs.components) == ["Button", "MainPanel", "Grid"]
	assert refs.components["MainPanel"].kind is ReferenceKind.CONTAINER
	assert refs.components["MainPanel"].import_path == "containers/Panel"
	assert refs.components["Grid"].is_lib_member
	assert refs.components["Grid"].absolute_path is None
	assert list(refs.modules) == ["Nav"]
	assert refs.modules["Nav"].absolute_path == os.path.join(str(root), "modules/Nav")
	assert refs.modules["Nav"].components == {}

	codes = {d.scope.rsplit(":", 1)[1]: d.code for d in diagnostics}
	assert codes == {
		"Helpers": "UnclassifiedReferenceError",
		"Missing": "UnresolvedImportError",
		"Group": "NestedExportWarning",
		"Computed": "UnresolvedImportError",
	}
	assert [d.severity for d in diagnostics if d.code == "NestedExportWarning"] == ["warning"]
	computed = [d for d in diagnostics if d.scope.endswith(":Computed")]
	assert computed[0].message == "Components index includes wrong reference definition: Computed"
	missing = [d for d in diagnostics if d.scope.endswith(":Missing")]
	assert missing[0].message == "Components index includes reference without import: Missing"


@pytest.mark.asyncio
async def test_same_line_imports_all_resolve(write_files):
	root = write_files(
		{
			"index.js": (
				"import A from './components/A'; import B from './components/B';\n"
				"const note = 'see export default { X }';\n"
				"export default { A, B };\n"
			)
		}
	)
	diagnostics = Diagnostics()
	builder = ImportRegistryBuilder(TreeConfig(app_dir=str(root)))
	refs = await builder.build_from_file(str(root / "index.js"), diagnostics=diagnostics)
	assert list(refs.components) == ["A", "B"]
	assert diagnostics.items == ()


@pytest.mark.asyncio
async def test_import_sources_are_repaired(write_files):
	root = write_files({"index.js": "import A from './components//A/';\nexport default { A };\n"})
	refs = await ImportRegistryBuilder(TreeConfig(app_dir=str(root))).build_from_file(str(root / "index.js"))
	assert refs.components["A"].import_path == "components/A"


@pytest.mark.asyncio
async def test_module_index_resolves_under_module_path(write_files):
	root = write_files({"modules/Nav/index.js": "import Item from './components/Item';\nexport default { Item };\n"})
	module = ModuleDescriptor(
		name="Nav",
		import_path="modules/Nav",
		absolute_path=str(root / "modules" / "Nav"),
	)
	builder = ImportRegistryBuilder(TreeConfig(app_dir=str(root)))
	refs = await builder.build_from_file(str(root / "modules" / "Nav" / "index.js"), module)
	assert refs.components["Item"].import_path == "modules/Nav/components/Item"


@pytest.mark.asyncio
async def test_unreadable_index_is_fatal(write_files):
	root = write_files({"broken.js": "import A from './components/A';\n"})
	builder = ImportRegistryBuilder(TreeConfig(app_dir=str(root)))
	with pytest.raises(FatalReadError):
		await builder.build_from_file(str(root / "missing.js"))
	with pytest.raises(FatalReadError):
		await builder.build_from_file(str(root / "broken.js"))


def test_repair_path():
	assert repair_path(".\\components\\Button") == "./components/Button"
	assert repair_path("./modules/Nav/../Nav/") == "./modules/Nav"
	assert repair_path("./../shared") == "../shared"
	assert repair_path("lodash/fp") == "lodash/fp"
	assert repair_path("") == ""
