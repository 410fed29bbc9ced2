"""
Command-line entry points for snakegame.
"""
