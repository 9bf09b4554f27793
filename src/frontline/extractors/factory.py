from typing import Type

from frontline.core.config import SourceDescriptor
from frontline.extractors.base import BaseExtractor
from frontline.extractors.saizensen import BaseLinkExtractor, DomainExtractor

EXTRACTORS: dict[str, Type[BaseExtractor]] = {
    "A": BaseLinkExtractor,
    "B": DomainExtractor,
}


def get_extractor(variant: str) -> Type[BaseExtractor]:
    """
    Factory Pattern: pick the extractor class for a source variant tag.
    Pollers never need to know which variants exist.
    """
    extractor_class = EXTRACTORS.get(variant)

    if not extractor_class:
        raise ValueError(f"Extractor for variant '{variant}' is not registered.")

    return extractor_class


def extractor_for(source: SourceDescriptor) -> BaseExtractor:
    return get_extractor(source.variant)(source)
