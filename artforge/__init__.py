"""Art Forge Application Package: deterministic procedural art engine.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
