"""
Frontend API - gateway to the Backend API
"""
