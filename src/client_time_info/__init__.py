"""Client time info - server time and client identity over HTTP."""

__version__ = "0.1.0"
