from .base import IMAGE_EXTENSIONS, BaseExtractor, ContentReference
from .factory import extractor_for, get_extractor
from .saizensen import BaseLinkExtractor, DomainExtractor

__all__ = [
    "IMAGE_EXTENSIONS",
    "BaseExtractor",
    "ContentReference",
    "BaseLinkExtractor",
    "DomainExtractor",
    "extractor_for",
    "get_extractor",
]
