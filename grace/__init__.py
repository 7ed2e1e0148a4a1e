"""Stability scoring, fitness ranking and parent selection for collagen triple-helix heterotrimer design."""

__version__ = "1.0.0"