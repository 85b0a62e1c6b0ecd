from __future__ import annotations

import argparse
import asyncio
import json
import logging
import os
import sys

import uvicorn

from comptree.config import TreeConfig
from comptree.errors import FatalReadError
from comptree.summarize import summarize_result
from comptree.tree import build_component_tree


def cmd_build(args: argparse.Namespace) -> None:
	config = TreeConfig(
		app_dir=os.path.abspath(args.path),
		index_file=os.path.abspath(args.index) if args.index else None,
		defaults_dir=os.path.abspath(args.defaults) if args.defaults else None,
		strict_structure=args.strict,
	)
	try:
		result = asyncio.run(build_component_tree(config))
	except FatalReadError as e:
		print(f"error: {e}", file=sys.stderr)
		sys.exit(1)
	if args.summary:
		print(summarize_result(result))
	else:
		print(json.dumps(result.model_dump(mode="json", by_alias=True), indent=2))


def cmd_serve(args: argparse.Namespace) -> None:
	uvicorn.run("api:app", host=args.host, port=args.port, reload=args.reload)


def main() -> None:
	parser = argparse.ArgumentParser(prog="comptree")
	parser.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING)")
	sub = parser.add_subparsers(dest="cmd", required=True)

	pb = sub.add_parser("build", help="Resolve the component tree and print it as JSON")
	pb.add_argument("path", help="Application source directory")
	pb.add_argument("--index", help="Root index file (default: <path>/index.js)")
	pb.add_argument("--defaults", help="Component defaults directory (default: <path>/defaults)")
	pb.add_argument("--strict", action="store_true", help="Drop components missing their entry files")
	pb.add_argument("--summary", action="store_true", help="Print a text summary instead of JSON")
	pb.set_defaults(func=cmd_build)

	ps = sub.add_parser("serve", help="Run FastAPI server")
	ps.add_argument("--host", default="127.0.0.1")
	ps.add_argument("--port", type=int, default=8000)
	ps.add_argument("--reload", action="store_true")
	ps.set_defaults(func=cmd_serve)

	args = parser.parse_args()
	logging.basicConfig(
		level=args.log_level.upper(),
		format="%(asctime)s %(levelname)s %(name)s: %(message)s",
		stream=sys.stderr,
	)
	args.func(args)


if __name__ == "__main__":
	main()
