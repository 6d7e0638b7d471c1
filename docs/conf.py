# Sphinx configuration for the PyMtx API reference.
# Build with: sphinx-build -b html docs docs/_build

import os
import sys

sys.path.insert(0, os.path.abspath('..'))

import pymtx  # noqa: E402

project = 'PyMtx'
copyright = '2026, PyMtx contributors'
author = 'PyMtx contributors'
release = pymtx.__version__
version = '.'.join(release.split('.')[:2])

# -- General configuration ---------------------------------------------------

extensions = [
    'sphinx.ext.autodoc',
    'sphinx.ext.napoleon',
    'sphinx.ext.viewcode',
    'sphinx.ext.intersphinx',
]

# core uses Google sections, matrix uses NumPy sections
napoleon_google_docstrings = True
napoleon_numpy_docstrings = True
napoleon_use_rtype = False

autodoc_member_order = 'groupwise'
autodoc_typehints = 'signature'
autodoc_default_options = {
    'members': True,
    'exclude-members': '__weakref__, __dict__',
}
# Matrix and the Params/Solution classes are frozen dataclasses
autodoc_class_signature = 'separated'

exclude_patterns = ['_build', 'Thumbs.db', '.DS_Store']

# -- HTML output -------------------------------------------------------------

html_theme = 'furo'
html_title = f'PyMtx {release}'
html_theme_options = {
    'light_css_variables': {'color-brand-primary': '#2c6fbb'},
    'dark_css_variables': {'color-brand-primary': '#5b9bdf'},
}

intersphinx_mapping = {
    'python': ('https://docs.python.org/3', None),
    'numpy': ('https://numpy.org/doc/stable/', None),
}
