"""Core utilities and shared infrastructure.

- config: Configuration loading and validation
- constants: Named constants
- exceptions: Custom exception hierarchy
"""
