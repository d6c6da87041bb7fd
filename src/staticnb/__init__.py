"""staticnb: render cells of HTML and a captured console into one static page.

    nb = staticnb.new()
    nb.add_content("Result", "<b>42</b>")
    nb.println("done")
    nb.close()  # writes <program>.html
"""

__all__ = [
    "Cell",
    "Notebook",
    "Console",
    "HEADER_CELL_STYLE",
    "CELL_STYLE",
    "NotebookIOError",
    "default_name",
    "title_case",
    "new",
]

__version__ = "0.1.0"

from .console import Console  # noqa: E402
from .model import (  # noqa: E402
    CELL_STYLE,
    HEADER_CELL_STYLE,
    Cell,
    Notebook,
    default_name,
    new,
    title_case,
)
from .render import NotebookIOError  # noqa: E402
