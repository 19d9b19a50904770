"""Search algorithms.

This package provides the indexed priority queue (`heap`), the shortest-path
engine (`spf`), result containers (`types`) and path helpers (`path_utils`).
"""
