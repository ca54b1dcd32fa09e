"""
Deck to PPTX 변환 모듈

슬라이드 덱을 PowerPoint 프레젠테이션으로 변환하는 기능을 제공합니다.
"""
from .converter import DeckToPptxConverter, convert_lecture_to_pptx

__all__ = ['DeckToPptxConverter', 'convert_lecture_to_pptx']
