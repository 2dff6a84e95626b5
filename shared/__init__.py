"""
Shared code for the Backend and Frontend API services
"""
