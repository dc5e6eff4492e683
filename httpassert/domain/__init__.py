"""
Domain layer.

Pure assertion logic: the structured failure and the assertion
primitives that raise it. No framework imports allowed.
"""
