# This package holds the FastAPI routing adapter for namespaced query-string state.
