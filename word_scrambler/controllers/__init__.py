"""
HTTP Controllers Package
"""
