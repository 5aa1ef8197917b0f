"""addonscan - discover installed game add-ons from their .toc manifests."""

from addonscan.models.addon import Addon
from addonscan.parsers.toc import TocExtractor, extract_addon

__version__ = "0.1.0"

__all__ = ["Addon", "TocExtractor", "extract_addon", "__version__"]
