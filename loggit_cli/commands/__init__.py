"""
CLI actions reachable from the main menu
"""
