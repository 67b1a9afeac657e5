import os
import sys

sys.path.insert(0, os.path.abspath("../../src"))

project = "urledit"
author = "urledit contributors"
import urledit

release = urledit.__version__

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.napoleon",
    "sphinx.ext.viewcode",
    "sphinx.ext.intersphinx",
    "myst_parser",
]

templates_path = ["_templates"]
exclude_patterns = []

myst_heading_anchors = 3
myst_enable_extensions = ["colon_fence"]

intersphinx_mapping = {
    "python": ("https://docs.python.org/3", None),
}

# Re-exports from urledit/__init__.py produce duplicate targets
suppress_warnings = [
    "ref.python",
    "autodoc",
]

autodoc_default_options = {
    "imported-members": False,
    "show-inheritance": True,
}
autodoc_member_order = "bysource"

html_theme = "furo"
html_title = "urledit"
