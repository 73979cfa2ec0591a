# loadgate/core/__init__.py
"""
Core components: errors, rule registry and readiness evaluation.
"""
