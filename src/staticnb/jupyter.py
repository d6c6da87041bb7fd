from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Union

import nbformat

from .model import Notebook


def _source(text: str) -> str:
    return text if text.endswith("\n") or not text else text + "\n"


def to_ipynb_dict(nb: Notebook) -> Dict:
    """Convert a Notebook to a Jupyter nbformat v4 dict.

    - The title becomes a leading markdown heading (skipped when empty).
    - Each cell becomes an empty code cell whose display_data output carries
      the HTML content verbatim; the cell title goes to metadata.
    - The console becomes a final stream output (skipped when empty).
    - Header fragments are kept, sorted by id, in notebook metadata.
    """
    cells: List[Dict] = []
    if nb.title:
        cells.append(
            {
                "cell_type": "markdown",
                "id": "title",
                "source": _source(f"# {nb.title}"),
                "metadata": {},
            }
        )
    for i, c in enumerate(nb.cells, start=1):
        cells.append(
            {
                "cell_type": "code",
                "id": f"cell-{i}",
                "source": "",
                "outputs": [
                    {
                        "output_type": "display_data",
                        "data": {"text/html": c.content},
                        "metadata": {},
                    }
                ],
                "execution_count": None,
                "metadata": {"staticnb": {"title": c.title}},
            }
        )
    console = nb.console_text
    if console:
        cells.append(
            {
                "cell_type": "code",
                "id": "console",
                "source": "",
                "outputs": [{"output_type": "stream", "name": "stdout", "text": console}],
                "execution_count": None,
                "metadata": {"staticnb": {"title": "Console"}},
            }
        )

    return {
        "nbformat": 4,
        "nbformat_minor": 5,
        "metadata": {
            "staticnb": {
                "title": nb.title,
                "headers": {k: nb.headers[k] for k in sorted(nb.headers)},
            },
        },
        "cells": cells,
    }


def export_ipynb_text(nb: Notebook) -> str:
    nbnode = nbformat.from_dict(to_ipynb_dict(nb))
    s = nbformat.writes(nbnode, version=4)
    if not s.endswith("\n"):
        s += "\n"
    return s


def export_ipynb_file(nb: Notebook, out_path: Union[str, Path]) -> None:
    text = export_ipynb_text(nb)
    with open(out_path, "w", encoding="utf-8") as f:
        f.write(text)
