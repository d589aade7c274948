"""Station record extraction.

Reads point features from a vector dataset, repairs mis-encoded Chinese
station names, builds bilingual titles by transliteration, and writes
each station as a delimited line or an SQL insert statement.
"""

__version__ = "0.1.0"
