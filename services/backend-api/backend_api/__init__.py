"""
Backend API - sample data service
"""
