"""
Core algebra, encodings and contracts for difference values.

This package is independent of the engine that schedules updates, the trace
storage that indexes them and the exchange layer that ships them.
"""
