"""
statapp - Static app compiler

Builds a static HTML application from page fragments, partials, stylesheets
and scripts using a small directive language embedded in the pages.
"""

__version__ = "1.0.0"

from .lib import AppCompiler, AppGenerator, LOG, state_connectToLogger

__all__ = ["AppCompiler", "AppGenerator", "LOG", "state_connectToLogger", "__version__"]
