"""Data models for add-on records."""

from addonscan.models.addon import Addon

__all__ = ["Addon"]
