"""SkillSwap Application Package — skill exchange marketplace backend.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
