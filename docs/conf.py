# Configuration file for the Sphinx documentation builder.
#
# For the full list of built-in configuration values, see the documentation:
# https://www.sphinx-doc.org/en/master/usage/configuration.html

import importlib.metadata
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

project = "labelenum"
copyright = "2026, The labelenum Team"
author = "The labelenum Team"
version = importlib.metadata.version("labelenum")
release = version
language = "en"

# -- General configuration ---------------------------------------------------

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.napoleon",
    "sphinx.ext.autodoc.typehints",
    "sphinx.ext.viewcode",
]

templates_path = ["_templates"]
exclude_patterns = ["_build", "Thumbs.db", ".DS_Store"]

autodoc_mock_imports = ["numpy"]

autodoc_default_options = {
    "members": True,
    "undoc-members": False,
    "special-members": "__init__",
}

# -- Options for HTML output -------------------------------------------------

html_theme = "pydata_sphinx_theme"
