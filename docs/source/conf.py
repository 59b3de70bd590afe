import os
import sys

# Put project root on sys.path so autoapi and doctest can import the package
sys.path.insert(0, os.path.abspath("../.."))

project = "autoseq"
author = "autoseq developers"

extensions = [
    "autoapi.extension",
    "sphinx.ext.doctest",
    "sphinx.ext.napoleon",
    "myst_parser",
    "sphinx_copybutton",
]
templates_path = []
exclude_patterns = []

html_theme = "alabaster"
master_doc = "index"

# ---------------------------------------------------------------------------
# sphinx-autoapi: generate API reference for the `autoseq` package
# ---------------------------------------------------------------------------
autoapi_type = "python"
autoapi_dirs = ["../../autoseq"]
autoapi_ignore = [
    "**/tests/**",
    "**/__pycache__/**",
]

autodoc_typehints = "description"

autoapi_options = [
    "members",
    "undoc-members",
    "show-inheritance",
    "show-module-summary",
]

autoapi_python_class_content = "both"
