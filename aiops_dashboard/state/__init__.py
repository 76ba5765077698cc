"""
Dashboard view state.

Immutable state struct plus one transition function per user action.
"""
