"""
Bootstrap helper for the Web3 data demo workspace.

Drives the ``kamu`` command-line tool through the fixed sequence that
prepares the Ethereum trading example and exposes it as the
``kamu-bootstrap`` console script.
"""

__all__ = ["__version__"]

__version__ = "0.1.0"
