"""
treediff version constants.
"""

# Library version (matches pyproject.toml)
TREEDIFF_VERSION = "0.1.0"
