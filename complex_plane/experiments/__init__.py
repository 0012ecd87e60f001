"""Runnable scripts built on the complex function library."""
