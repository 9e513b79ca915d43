"""
Scenes for Table Pong.
"""
