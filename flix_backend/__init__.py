"""
Shared flix backend library code.

This package holds the reusable pieces behind the command-line entrypoints in
`scripts/`:
- the running-total `Calculator`
- external integrations (OMDb movie lookups, release manifest)

Entrypoints should live outside this package and import from `flix_backend`
rather than the other way around.
"""
