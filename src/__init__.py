"""
Package marker for the catalog services source tree.
`src.resources` holds the in-memory resource core and `src.api` the HTTP services built on it.
Process-wide settings and logging live in `src.common`.
"""
