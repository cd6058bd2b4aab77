"""
HackRadar - hackathon winners feed and project idea suggestions.
"""

__version__ = "1.0.0"
