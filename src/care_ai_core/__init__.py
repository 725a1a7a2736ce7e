"""
care-ai-core

Dual-model analysis for healthcare outreach: sends one prompt to two
text-generation backends concurrently and lets a judge pick the better answer.
"""

__version__ = "0.1.0"
