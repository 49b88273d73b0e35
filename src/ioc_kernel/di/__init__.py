from .container import Container
from .keys import KeyedPair
from .markers import Inject, constructor
from .metadata import InjectionMetadataCache

__all__ = ["Container", "KeyedPair", "Inject", "constructor", "InjectionMetadataCache"]
