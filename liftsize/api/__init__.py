"""
HTTP API for the elevator sizing estimator.
"""
