"""Using staticnb as a library: writes library_usage.html in the current directory."""
import staticnb

with staticnb.new() as nb:
    nb.set_header("mathjax", '<script src="https://cdn.jsdelivr.net/npm/mathjax@3/es5/tex-mml-chtml.js"></script>')
    nb.add_content("Formula", r"<p>\(E = mc^2\)</p>")
    with nb.capture():
        print("captured like a terminal <3")
    nb.println("total cells:", len(nb.cells))
