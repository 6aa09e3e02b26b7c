# site_rag/__init__.py
"""
SiteRAG package initializer.
Defines the package version; the CLI lives in :mod:`site_rag.cli`.
"""
__version__ = "0.1.0"
