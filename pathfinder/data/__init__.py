"""
Data access for the PathFinder JSON documents.

This package is responsible for:
* Validating the raw documents at the load boundary.
* Holding the loaded datasets in memory behind read-only accessors.
* Reporting which datasets fell back to their empty defaults.
"""
