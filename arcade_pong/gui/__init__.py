"""
PyGame front end of Arcade Pong
"""
