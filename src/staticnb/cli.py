from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .config import ConfigError, load_config
from .jupyter import export_ipynb_file
from .model import HEADER_CELL_STYLE, default_name, new
from .runner import run_script


def _cmd_run(args: argparse.Namespace) -> int:
    script = Path(args.script)
    if not script.is_file():
        print(f"ERROR: no such script: {script}")
        return 2
    nb = new(default_name(str(script)))
    # page goes next to the script
    nb.output = str(script.with_name(Path(nb.output).name))

    if args.config:
        try:
            load_config(args.config).apply(nb)
        except (OSError, ConfigError) as e:
            print(f"ERROR: config {args.config}: {e}")
            return 2
    if args.title is not None:
        nb.title = args.title
    if args.output:
        nb.output = args.output
    if args.no_style:
        nb.set_header(HEADER_CELL_STYLE, "")

    result = run_script(str(script), nb, args.args)

    try:
        nb.close()
        if args.ipynb:
            export_ipynb_file(nb, args.ipynb)
    except OSError as e:
        print(f"ERROR: {e}")
        return 2
    print(f"Wrote: {nb.output}")
    if args.ipynb:
        print(f"Wrote: {args.ipynb}")
    if result.failed:
        print(f"FAILED: {result.error}")
        return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="staticnb", description="Static HTML notebooks for script output"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_run = sub.add_parser(
        "run",
        help="Run a script with `nb` in scope and save its notebook",
        description="Options go before SCRIPT; everything after it is passed to the script.",
    )
    p_run.add_argument("script", help="Python script to execute")
    p_run.add_argument(
        "args", nargs=argparse.REMAINDER, help="Arguments passed to the script"
    )
    p_run.add_argument("-o", "--output", help="HTML file (default: <script>.html)")
    p_run.add_argument("--title", help="Notebook title (default: from script name)")
    p_run.add_argument("--config", help="YAML config file")
    p_run.add_argument(
        "--no-style",
        dest="no_style",
        action="store_true",
        help="Drop the default cell stylesheet",
    )
    p_run.add_argument("--ipynb", help="Also export a Jupyter .ipynb file")

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.cmd == "run":
        return _cmd_run(args)

    print(f"Unknown command '{args.cmd}'")
    return 2


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
