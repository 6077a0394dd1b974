"""
Sentence Parsers
Read simulator wire output back into fields
"""

from .nmea_parser import NMEAParser

__all__ = ['NMEAParser']
