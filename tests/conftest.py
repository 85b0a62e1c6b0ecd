from textwrap import dedent
from typing import Dict

import pytest


@pytest.fixture
def write_files(tmp_path):
	"""Write `{relative path: text}` under tmp_path and return tmp_path."""

	def _write(files: Dict[str, str]):
		for rel_path, text in files.items():
			p = tmp_path / rel_path
			p.parent.mkdir(parents=True, exist_ok=True)
			p.write_text(dedent(text))
		return tmp_path

	return _write
