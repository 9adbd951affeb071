"""
External system integrations (OMDb, release manifest).

New external clients should live under this namespace so they remain decoupled
from the entrypoints in `scripts/`.
"""
