"""Sphinx configuration for the Pitchside API reference."""

from __future__ import annotations

import sys
from datetime import datetime
from pathlib import Path

# autodoc imports the package straight from the checkout.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

project = "Pitchside Match Simulator"
author = "WelshDragon"
copyright = f"{datetime.now():%Y}, {author}"

try:
    from pitchside import __version__ as release
except ImportError:  # pragma: no cover - docs build should not fail if import fails
    release = "0.1.0"
version = ".".join(release.split(".")[:2])

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.autosummary",
    "sphinx.ext.intersphinx",
    "sphinx.ext.napoleon",
    "sphinx.ext.viewcode",
]

autosummary_generate = True
autodoc_member_order = "bysource"
autodoc_default_options = {"members": True, "show-inheritance": True}
intersphinx_mapping = {"python": ("https://docs.python.org/3", None)}

root_doc = "index"
templates_path = ["_templates"]
exclude_patterns: list[str] = ["_build", "Thumbs.db", ".DS_Store"]

html_theme = "sphinx_rtd_theme"
html_title = f"Pitchside {release}"

# Numpydoc sections render through napoleon; type hints go to the field list.
autodoc_typehints = "description"
napoleon_google_docstring = False
napoleon_numpy_docstring = True
