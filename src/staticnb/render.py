"""
HTML renderer for notebooks.

Pure: reads the notebook state and produces one self-contained HTML5
document. Titles and console text are escaped; cell content and header
fragments are trusted HTML and inserted verbatim.
"""

from __future__ import annotations

import io
from typing import IO, Dict, List, Union

from jinja2 import Environment, StrictUndefined
from markupsafe import Markup


class NotebookIOError(OSError):
    """Writing a notebook to its sink or output file failed."""


NOTEBOOK_TEMPLATE = """<!DOCTYPE html>
<html>
	<head>
	{%- if title %}<title>{{ title }}</title>{% endif -%}
	{%- for fragment in headers %}{{ fragment }}{% endfor -%}
	</head>
	<body>
		{% if title %}<h1>{{ title }}</h1>{% endif %}
		<div class="cell-container">
		{%- for cell in cells %}
			<details open class="cell">
				<summary>{{ cell.title }}</summary>
				{{ cell.content }}
			</details>
		{%- endfor %}
			<details open class="cell">
				<summary>Console</summary>
				<pre>{{ console }}</pre>
			</details>
		</div>
	</body>
</html>"""

_ENV = Environment(autoescape=True, undefined=StrictUndefined)
_TEMPLATE = _ENV.from_string(NOTEBOOK_TEMPLATE)


def sorted_headers(headers: Dict[str, str]) -> List[Markup]:
    """Return header fragments ordered by id so output is repeatable."""
    return [Markup(headers[k]) for k in sorted(headers)]


def render_text(nb) -> str:
    cells = [{"title": c.title, "content": Markup(c.content)} for c in nb.cells]
    return _TEMPLATE.render(
        title=nb.title,
        headers=sorted_headers(nb.headers),
        cells=cells,
        console=nb.console_text,
    )


def render(nb, sink: Union[IO[str], IO[bytes]]) -> None:
    """Write the notebook as HTML into ``sink``.

    Binary sinks (io.RawIOBase, io.BufferedIOBase) receive UTF-8 bytes,
    anything else receives text. A sink that fails or rejects the data
    surfaces as NotebookIOError.
    """
    text = render_text(nb)
    data: Union[str, bytes] = text
    if isinstance(sink, (io.RawIOBase, io.BufferedIOBase)):
        data = text.encode("utf-8")
    try:
        sink.write(data)  # type: ignore[arg-type]
    except (OSError, ValueError, TypeError) as e:
        raise NotebookIOError(f"cannot write notebook: {e}") from e
