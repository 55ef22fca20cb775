"""
difflow — difference values for incremental / differential computation.
"""
