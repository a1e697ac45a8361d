"""
Player License Service Django project.
"""
