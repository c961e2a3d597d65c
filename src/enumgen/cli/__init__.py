"""
enumgen CLI package.

- main.py: ``enumgen plan`` and ``enumgen directives``
"""

from enumgen.cli.main import app, main

__all__ = ["app", "main"]
