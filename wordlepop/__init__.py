"""
wordlepop: a letter-popularity Wordle solver with a small experiment harness.
"""

__version__ = "1.0.0"

# Every word in play has this many letters.
WORD_LENGTH = 5
