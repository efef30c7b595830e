"""
License Status Service Django project.
"""
