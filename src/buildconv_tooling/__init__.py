"""Flat directory conventions (src, test, resources, <lang>Src, <lang>Test) for build projects."""

__version__ = "0.1.0"
