"""Aries Avalon: Aries identifier resolution backed by the Avalon Solr index."""

__version__ = "1.0.0"
