"""
Command-line Scripts
Contract deployment and pre-flight checks
"""
