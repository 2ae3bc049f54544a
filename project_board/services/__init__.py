"""Application services layer.

Services hold shared application state and coordinate domain objects. They
should avoid UI concerns.
"""
