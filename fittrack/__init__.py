"""
FitTrack - local weight and workout tracker.
"""
__version__ = "1.0.0"
