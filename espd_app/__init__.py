"""
ESPD App - Procurement Criterion Import Engine

Imports the criteria of a European Single Procurement Document response:
walks each criterion's requirement tree, parses the raw responses against a
definitions catalogue and transcribes them onto typed criterion records.
"""

__version__ = "0.1.0"
__author__ = "ESPD Team"
