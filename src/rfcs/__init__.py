"""
rfcs

Query the RFC Editor index and retrieve RFC documents, with a local
cache in front of every download.
"""

__version__ = "1.0.0"
