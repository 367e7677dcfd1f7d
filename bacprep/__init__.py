"""Bacalaureat exam preparation backend."""
