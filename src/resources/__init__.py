"""
Package marker for source code under `src.resources`.
It groups the in-memory collection store, the resource definitions, and the generic resource manager.
Both HTTP services build on these modules; this file intentionally stays lightweight.
"""
