"""Issue and pull request notification fan-out service.

The package re-exports nothing; import from the layer modules directly.
"""
