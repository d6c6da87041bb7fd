from __future__ import annotations

import logging
import sys
import traceback
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional

from .model import Notebook

LOGGER = logging.getLogger(__name__)


@dataclass
class RunResult:
    script: Path
    failed: bool
    error: Optional[str]  # "ExceptionName: message" when failed
    cells: int


def _exec_captured(code: str, filename: str, g: Dict[str, object], nb: Notebook) -> Optional[str]:
    # Execute code with stdout/stderr going to the notebook console.
    try:
        with nb.capture():
            exec(compile(code, filename, "exec"), g, g)  # noqa: S102
    except SystemExit as e:
        if e.code in (None, 0):
            return None
        nb.println(f"SystemExit: {e.code}")
        return f"SystemExit: {e.code}"
    except Exception as e:  # noqa: BLE001
        nb.print(traceback.format_exc())
        return f"{e.__class__.__name__}: {e}"
    return None


def run_script(path: str, nb: Notebook, argv: Optional[List[str]] = None) -> RunResult:
    """Run a Python script as ``__main__`` with ``nb`` in its globals.

    Everything the script prints lands in the notebook console. A failing
    script leaves its traceback there and is reported in the result; the
    notebook stays renderable either way.
    """
    script = Path(path)
    code = script.read_text(encoding="utf-8")
    g: Dict[str, object] = {
        "__name__": "__main__",
        "__file__": str(script),
        "nb": nb,
    }
    old_argv, old_path = sys.argv, list(sys.path)
    sys.argv = [str(script)] + list(argv or [])
    # same as `python script.py`: sibling modules are importable
    sys.path.insert(0, str(script.resolve().parent))
    try:
        error = _exec_captured(code, str(script), g, nb)
    finally:
        sys.argv = old_argv
        sys.path[:] = old_path
    if error:
        LOGGER.error("Script %s failed: %s", script, error)
    else:
        LOGGER.debug("Script %s finished, %d cells", script, len(nb.cells))
    return RunResult(script=script, failed=error is not None, error=error, cells=len(nb.cells))
