"""
HTTP API for comment analysis, topic suggestions and script generation.
"""
