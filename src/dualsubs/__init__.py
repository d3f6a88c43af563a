from __future__ import annotations

from .config import DualSubsConfig
from .pipeline import DualSubsPipeline

__all__ = ["DualSubsConfig", "DualSubsPipeline"]

__version__ = "0.1.0"
