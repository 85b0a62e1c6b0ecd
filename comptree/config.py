from __future__ import annotations

import os
from typing import Optional

from pydantic import BaseModel, ConfigDict


HTML_DEFAULTS_DIR_NAME = "#html"
INDEX_FILE_NAME = "index.js"


class TreeConfig(BaseModel):
	"""Paths a single build resolves against. Passed explicitly, never read globally."""

	model_config = ConfigDict(frozen=True)

	app_dir: str
	index_file: Optional[str] = None
	defaults_dir: Optional[str] = None
	# Drop components whose entry file (or container reducer) is missing
	strict_structure: bool = False

	@property
	def index_path(self) -> str:
		return self.index_file or os.path.join(self.app_dir, INDEX_FILE_NAME)

	@property
	def defaults_path(self) -> str:
		return self.defaults_dir or os.path.join(self.app_dir, "defaults")

	@property
	def html_defaults_path(self) -> str:
		return os.path.join(self.defaults_path, HTML_DEFAULTS_DIR_NAME)
