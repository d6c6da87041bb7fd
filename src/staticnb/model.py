from __future__ import annotations

import logging
import sys
import traceback
from contextlib import contextmanager, redirect_stderr, redirect_stdout
from dataclasses import dataclass, field
from pathlib import Path
from typing import IO, Dict, Iterator, List, Mapping, Optional, Union

from .console import Console
from .render import NotebookIOError, render, render_text

LOGGER = logging.getLogger(__name__)

HEADER_CELL_STYLE = "cell-style"  # header id of the default cell stylesheet

CELL_STYLE = """<style>
	.cell-container {
		display: flex;
		flex-direction: column;
	}
	details.cell {
		border: 1px solid #aaa;
		border-radius: 4px;
		padding: 0.5em 0.5em 0;
		display: block;
	}
	details.cell > summary {
		font-weight: bold;
		margin: -0.5em -0.5em 0;
		padding: 0.5em;
	}
	details[open].cell {
		padding: 0.5em;
	}
	details[open].cell > summary {
		border-bottom: 1px solid #aaa;
		margin-bottom: 0.5em;
	}
</style>"""


@dataclass(frozen=True)
class Cell:
    """A titled block of trusted HTML.

    title: summary label, may be empty.
    content: HTML inserted verbatim in the rendered page.
    """

    title: str
    content: str


@dataclass
class Notebook:
    """In-memory notebook: ordered cells, keyed head fragments and a console.

    cells: in insertion order, rendered in that order.
    headers: header id -> HTML fragment for <head>, rendered sorted by id.
    console: append-only text stream rendered as literal text in a final cell.
    """

    title: str = ""
    output: str = "notebook.html"
    cells: List[Cell] = field(default_factory=list)
    headers: Dict[str, str] = field(
        default_factory=lambda: {HEADER_CELL_STYLE: CELL_STYLE}
    )
    console: Console = field(default_factory=Console, repr=False, compare=False)

    # ---------- content ----------

    def add_content(self, title: str, content: str) -> Cell:
        """Append ``content`` (trusted HTML) as a new cell."""
        cell = Cell(title=title, content=content)
        self.cells.append(cell)
        return cell

    def set_header(self, header_id: str, fragment: str) -> None:
        """Set the head fragment for ``header_id``; an existing value is replaced."""
        self.headers[header_id] = fragment

    def remove_header(self, header_id: str) -> None:
        self.headers.pop(header_id, None)

    # ---------- console ----------

    def print(self, *values: object, sep: str = " ") -> int:
        """Write ``values`` to the console, joined by ``sep``, no newline.

        Strings are separated by ``sep`` as well, as with the builtin
        print(). Returns the number of characters written.
        """
        return self.console.write(sep.join(str(v) for v in values))

    def printf(self, fmt: str, *args: object) -> int:
        """``%``-format ``args`` into ``fmt``; one mapping argument feeds ``%(name)s``."""
        if len(args) == 1 and isinstance(args[0], Mapping):
            return self.console.write(fmt % args[0])
        return self.console.write(fmt % args)

    def println(self, *values: object, sep: str = " ") -> int:
        """Like print(), plus a trailing newline."""
        return self.console.write(sep.join(str(v) for v in values) + "\n")

    @property
    def console_text(self) -> str:
        return self.console.getvalue()

    @contextmanager
    def capture(self) -> Iterator[Console]:
        """Redirect stdout and stderr into the console."""
        with redirect_stdout(self.console), redirect_stderr(self.console):
            yield self.console

    # ---------- output ----------

    def render(self, sink: Union[IO[str], IO[bytes]]) -> None:
        render(self, sink)

    def render_text(self) -> str:
        return render_text(self)

    def close(self) -> None:
        """Render the notebook into the ``output`` file."""
        path = Path(self.output)
        try:
            if path.parent != Path("."):
                path.parent.mkdir(parents=True, exist_ok=True)
            f = path.open("w", encoding="utf-8")
        except OSError as e:
            raise NotebookIOError(f"cannot create output file {self.output!r}") from e
        try:
            with f:
                render(self, f)
        except OSError as e:
            raise NotebookIOError(f"cannot render notebook: {e}") from e
        LOGGER.debug("Wrote notebook %s (%d cells)", path, len(self.cells))

    def __enter__(self) -> "Notebook":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # noqa: ANN001
        if exc is not None:
            self.console.write(
                "".join(traceback.format_exception(exc_type, exc, tb))
            )
        self.close()


def default_name(argv0: Optional[str] = None) -> str:
    """Notebook name derived from the running program.

    Base name of ``argv0`` (``sys.argv[0]`` by default) without a ``.py``
    suffix. ``__main__.py`` stands for its package directory; an empty
    program name (or ``-c``) gives ``"notebook"``.
    """
    if argv0 is None:
        argv0 = sys.argv[0] if sys.argv else ""
    if not argv0 or argv0 == "-c":
        return "notebook"
    p = Path(argv0)
    if p.name == "__main__.py":
        return p.parent.name or "notebook"
    name = p.name
    if name.endswith(".py"):
        name = name[: -len(".py")]
    return name or "notebook"


def title_case(name: str) -> str:
    """Upper-case the first letter of each word, leaving the rest alone.

    Words are separated by anything but letters, digits and underscores, so
    "notebook.test" becomes "Notebook.Test".
    """
    out: List[str] = []
    prev_sep = True
    for ch in name:
        out.append(ch.upper() if prev_sep else ch)
        prev_sep = not (ch.isalnum() or ch == "_")
    return "".join(out)


def new(
    name: Optional[str] = None,
    *,
    output: Optional[str] = None,
    title: Optional[str] = None,
) -> Notebook:
    """Create a notebook named after the running program.

    ``output`` defaults to ``<name>.html`` and ``title`` to the title-cased
    name; ``name`` defaults to default_name().
    """
    if name is None:
        name = default_name()
    if output is None:
        output = name + ".html"
    if title is None:
        title = title_case(name)
    return Notebook(title=title, output=output)
