"""
Components with result-returning entry points.
"""
