"""Buffon's needle estimation of pi."""
