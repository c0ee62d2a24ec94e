"""Service Layer — the SkillSwap operations, orchestrating store IO around pure core checks.

Invariants:
    - Every service receives its store explicitly (constructor injection), never a global
    - Argument checks (core/enforce_*) run before any store lookup
    - Services raise SkillSwapError subclasses; they never return error dicts
"""
