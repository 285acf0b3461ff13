"""Mastermind: feedback scoring, a deductive codebreaker and a game harness."""

__version__ = "0.1.0"
