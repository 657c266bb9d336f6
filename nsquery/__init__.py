"""
Package marker for the namespaced query-string toolkit.
It groups the codec, the parameter algebra, and the thin routing and API adapters under one import path.
Most functionality lives in the `qs` subpackage; this file intentionally stays lightweight.
"""
