"""
덱 변환기 모듈

슬라이드 덱을 다른 형식으로 내보내는 기능을 제공합니다.
"""

from .deck_pptx import DeckToPptxConverter, convert_lecture_to_pptx

__all__ = [
    "DeckToPptxConverter",
    "convert_lecture_to_pptx",
]
