#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# PyBigQ documentation build configuration file

import os
import sys
sys.path.insert(1, os.path.abspath('..'))

import bigq_version

# -- General configuration ------------------------------------------------

extensions = [
    'sphinx.ext.autodoc',
    'sphinx.ext.doctest',
    'sphinx.ext.todo',
]

templates_path = ['_templates']
source_suffix = '.rst'
master_doc = 'index'

project = 'PyBigQ'
copyright = '2019, Florian Schanda'
author = 'Florian Schanda'

version = bigq_version.version
release = bigq_version.version

exclude_patterns = ['_build', 'Thumbs.db', '.DS_Store']

# The name of the Pygments (syntax highlighting) style to use.
pygments_style = 'sphinx'

todo_include_todos = False


# -- Options for HTML output ----------------------------------------------

html_theme = 'classic'
