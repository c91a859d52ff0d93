"""Route Modules — one file per resource/concern.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
    - Routes hold no SQL: store access goes through the repository

Design Decisions:
    - Explicit registration in main.py over auto-discovery
"""
