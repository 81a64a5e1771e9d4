"""MTK archive extractor"""
import logging

__version__ = "0.1.0"

# advisories are returned to the caller, only log them when configured to
logging.getLogger(__name__).addHandler(logging.NullHandler())
