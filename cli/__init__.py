"""CLI package for the book manager"""
from .main import cli

__all__ = ['cli']
