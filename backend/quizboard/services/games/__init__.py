"""Game domain services: roster setup, point changes and ranking.

This package contains pure domain logic that should be imported by
HTTP routes and socket handlers, keeping transport concerns separated
from core game mechanics.
"""
