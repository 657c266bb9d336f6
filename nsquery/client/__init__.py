# This package holds the outbound API client that consumes the unnamespaced encoding.
