"""Building blocks for spies, stubs and mocks."""

# Submodules are imported explicitly by callers; the public helpers are
# re-exported from ``simple_double`` itself.

__all__: list[str] = []
