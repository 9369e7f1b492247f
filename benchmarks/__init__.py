"""Performance benchmarks for floydkit.

Microbenchmarks for the relaxation strategies.
"""
