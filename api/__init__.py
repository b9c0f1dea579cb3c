"""
API package for the Tech-Hub Activity Dashboard.
"""
