"""Fuzz tests for utfconv.

This package contains:
- test_decoder_differential: decoder against the stdlib strict UTF-8 codec

Python 3.13+.
"""
