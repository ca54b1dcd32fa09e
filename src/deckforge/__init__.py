"""
deckforge - 강의 HTML 슬라이드 분할 라이브러리

Moodle 강의 페이지(.generaltable)의 본문을 텍스트/이미지/테이블 블록으로 나누고,
슬라이드 크기에 맞게 묶어 페이지 목록(덱)을 만듭니다.
"""

__version__ = "0.1.0"

from .core.document import Deck
from .core.navigator import DeckNavigator
from .parsers.lecture_parser import LectureParser, build_pages
from .converters import DeckToPptxConverter

__all__ = [
    "Deck",
    "DeckNavigator",
    "LectureParser",
    "build_pages",
    "DeckToPptxConverter",
]
