"""
Infrastructure Package
======================

Wiring shared by the apps.

Modules:
    - container: Lazy service locator handing out the domain services

This package enables:
    - Views that never construct services directly
    - Swapping service implementations in tests
"""
