"""Path finding over adjacency snapshots.

`transition` builds read-only adjacency snapshots (transition maps),
`finder` defines the pluggable `PathFinder` interface with its registry and
the default depth-first finder, and `utils` holds helpers for edge paths.
"""
