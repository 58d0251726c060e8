"""I/O adapter package.

This package contains backend boundary code for:
  - reading deployment settings from the environment
  - resolving the model data root
  - parsing request query parameters into engine selectors

Keep this package free of business logic; it should remain an interface layer.
"""
