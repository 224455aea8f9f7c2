"""Domain Types - rich types that replace bare primitives across the codebase.

Invariants:
    - UserId wraps the store-assigned integer key; never set by callers

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
"""

from typing import NewType

UserId = NewType("UserId", int)
