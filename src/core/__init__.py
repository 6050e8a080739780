"""Core domain package for minigrep.

Core contains the config model, the error types and the line search logic
without any file-system or console code, keeping the search itself pure.
"""
