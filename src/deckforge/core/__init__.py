"""Core module"""
from .document import (
    PageKind,
    TextBlock,
    ImageBlock,
    TableBlock,
    PrimitiveBlock,
    TitlePage,
    HtmlGroupPage,
    ImagePage,
    TablePage,
    PageDescriptor,
    Deck,
)
from .parser import BaseParser
from .extractor import BaseExtractor, PrimitiveBlockExtractor
from .navigator import DeckNavigator, EMPTY_DECK_MESSAGE

__all__ = [
    "PageKind",
    "TextBlock",
    "ImageBlock",
    "TableBlock",
    "PrimitiveBlock",
    "TitlePage",
    "HtmlGroupPage",
    "ImagePage",
    "TablePage",
    "PageDescriptor",
    "Deck",
    "BaseParser",
    "BaseExtractor",
    "PrimitiveBlockExtractor",
    "DeckNavigator",
    "EMPTY_DECK_MESSAGE",
]
