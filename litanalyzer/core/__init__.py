"""
Core components for litanalyzer.
"""
