"""
Table scene: hosts the frame driver on mini-arcade-core.
"""
