from __future__ import annotations

import os
from typing import Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from comptree.config import TreeConfig
from comptree.errors import FatalReadError
from comptree.model import BuildResult
from comptree.tree import build_component_tree


app = FastAPI(title="Component Tree Resolver")


class TreeRequest(BaseModel):
	app_dir: str
	index_file: Optional[str] = None
	defaults_dir: Optional[str] = None
	strict_structure: bool = False


@app.post("/tree", response_model=BuildResult)
async def tree(req: TreeRequest) -> BuildResult:
	app_dir = os.path.abspath(req.app_dir)
	if not os.path.isdir(app_dir):
		raise HTTPException(status_code=400, detail=f"Invalid app_dir: {app_dir}")

	config = TreeConfig(
		app_dir=app_dir,
		index_file=req.index_file,
		defaults_dir=req.defaults_dir,
		strict_structure=req.strict_structure,
	)
	try:
		return await build_component_tree(config)
	except FatalReadError as e:
		raise HTTPException(status_code=422, detail=str(e))
