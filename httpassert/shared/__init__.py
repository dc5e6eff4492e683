"""
Shared module package.

Contains cross-cutting concerns:
- Assertion failure rendering (recovery boundary and middleware)
- Logging configuration
"""
