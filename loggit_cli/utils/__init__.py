"""
Shared CLI utilities: config, errors, logging, output
"""
