import io
import sys
import tempfile
import unittest
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

from staticnb.model import (
    CELL_STYLE,
    HEADER_CELL_STYLE,
    Notebook,
    default_name,
    new,
    title_case,
)
from staticnb.render import NotebookIOError


class TestDefaults(unittest.TestCase):
    def test_new_notebook_has_only_default_style(self):
        nb = Notebook()
        self.assertEqual(nb.headers, {HEADER_CELL_STYLE: CELL_STYLE})
        self.assertEqual(nb.cells, [])
        self.assertEqual(nb.console_text, "")

    def test_default_name(self):
        self.assertEqual(default_name("/usr/local/bin/notebook.test"), "notebook.test")
        self.assertEqual(default_name("sims/orbit.py"), "orbit")
        self.assertEqual(default_name("/src/mypkg/__main__.py"), "mypkg")
        self.assertEqual(default_name(""), "notebook")
        self.assertEqual(default_name("-c"), "notebook")

    def test_title_case(self):
        self.assertEqual(title_case("notebook.test"), "Notebook.Test")
        self.assertEqual(title_case("my_sim"), "My_sim")
        self.assertEqual(title_case("orbit-v2 run"), "Orbit-V2 Run")
        self.assertEqual(title_case("myApp"), "MyApp")
        self.assertEqual(title_case(""), "")

    def test_new_derives_output_and_title(self):
        nb = new("notebook.test")
        self.assertEqual(nb.output, "notebook.test.html")
        self.assertEqual(nb.title, "Notebook.Test")

        nb2 = new("orbit", output="out/x.html", title="")
        self.assertEqual(nb2.output, "out/x.html")
        self.assertEqual(nb2.title, "")


class TestContent(unittest.TestCase):
    def test_cells_keep_insertion_order(self):
        nb = Notebook()
        for t in ["zeta", "alpha", "mid"]:
            nb.add_content(t, f"<p>{t}</p>")
        self.assertEqual([c.title for c in nb.cells], ["zeta", "alpha", "mid"])
        self.assertEqual(nb.cells[1].content, "<p>alpha</p>")

    def test_set_header_overwrites(self):
        nb = Notebook()
        nb.set_header("meta", "<meta charset=latin1>")
        nb.set_header("meta", "<meta charset=utf-8>")
        self.assertEqual(nb.headers["meta"], "<meta charset=utf-8>")
        self.assertEqual(len(nb.headers), 2)

    def test_remove_header(self):
        nb = Notebook()
        nb.remove_header(HEADER_CELL_STYLE)
        nb.remove_header("missing")
        self.assertEqual(nb.headers, {})


class TestConsole(unittest.TestCase):
    def test_print_variants(self):
        nb = Notebook()
        self.assertEqual(nb.print("a", 1), 3)
        self.assertEqual(nb.printf(" %d items, %.1f%%", 3, 50.0), 15)
        self.assertEqual(nb.println("", "end"), 5)
        self.assertEqual(nb.console_text, "a 1 3 items, 50.0% end\n")

    def test_print_separates_strings(self):
        nb = Notebook()
        nb.print("Hello", "world")
        nb.print("|", sep="")
        nb.print("a", "b", sep="")
        self.assertEqual(nb.console_text, "Hello world|ab")

    def test_printf_named_and_errors(self):
        nb = Notebook()
        nb.printf("%(name)s=%(value)d", {"name": "x", "value": 7})
        self.assertEqual(nb.console_text, "x=7")
        with self.assertRaises(TypeError):
            nb.printf("%d %d", 1)

    def test_console_is_a_text_stream(self):
        nb = Notebook()
        print("via print", file=nb.console)
        with nb.capture():
            print("captured")
            sys.stderr.write("err\n")
        self.assertEqual(nb.console_text, "via print\ncaptured\nerr\n")

    def test_console_is_append_only(self):
        nb = Notebook()
        nb.print("keep")
        with self.assertRaises(io.UnsupportedOperation):
            nb.console.seek(0)
        with self.assertRaises(io.UnsupportedOperation):
            nb.console.truncate(0)
        with self.assertRaises(TypeError):
            nb.console.write(b"bytes")
        nb.console.close()
        nb.print("!")
        self.assertEqual(nb.console_text, "keep!")


class TestClose(unittest.TestCase):
    def test_close_writes_output_file(self):
        with tempfile.TemporaryDirectory() as td:
            out = Path(td) / "nested" / "run.html"
            nb = Notebook(title="Run", output=str(out))
            nb.add_content("Cell", "<i>x</i>")
            nb.close()
            text = out.read_text(encoding="utf-8")
            self.assertEqual(text, nb.render_text())
            self.assertIn("<i>x</i>", text)

    def test_close_wraps_creation_failure(self):
        with tempfile.TemporaryDirectory() as td:
            blocker = Path(td) / "file"
            blocker.write_text("", encoding="utf-8")
            nb = Notebook(output=str(blocker / "run.html"))
            with self.assertRaises(NotebookIOError) as ctx:
                nb.close()
            self.assertIsInstance(ctx.exception, OSError)
            self.assertIsNotNone(ctx.exception.__cause__)

    def test_context_manager_records_exception(self):
        with tempfile.TemporaryDirectory() as td:
            out = Path(td) / "ctx.html"
            with self.assertRaises(RuntimeError):
                with Notebook(output=str(out)) as nb:
                    nb.println("before")
                    raise RuntimeError("boom <now>")
            text = out.read_text(encoding="utf-8")
            self.assertIn("before\n", text)
            self.assertIn("RuntimeError: boom &lt;now&gt;", text)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
