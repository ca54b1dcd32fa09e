"""
Deck to PPTX 변환 설정 및 상수

슬라이드 크기, 글꼴 크기, 색상 등 렌더링 공통 설정을 관리합니다.
"""
from pptx.util import Inches, Pt
from pptx.dml.color import RGBColor
from dataclasses import dataclass
from typing import Dict


@dataclass
class SlideConfig:
    """슬라이드 레이아웃 설정 (16:9)"""
    width: int = Inches(13.333)
    height: int = Inches(7.5)
    margin_left: int = Inches(0.6)
    margin_right: int = Inches(0.6)
    margin_top: int = Inches(0.5)
    margin_bottom: int = Inches(0.4)
    title_height: int = Inches(0.9)
    title_font_size: int = Pt(32)
    cover_font_size: int = Pt(48)
    body_font_size: int = Pt(18)
    heading_font_size: int = Pt(22)
    code_font_name: str = "Consolas"

    @property
    def content_width(self) -> int:
        return self.width - self.margin_left - self.margin_right

    @property
    def content_top(self) -> int:
        return self.margin_top + self.title_height

    @property
    def content_height(self) -> int:
        return self.height - self.content_top - self.margin_bottom


@dataclass
class TableConfig:
    """테이블 설정"""
    min_row_height: int = Inches(0.3)
    header_font_size: int = Pt(14)
    body_font_size: int = Pt(12)
    small_font_size: int = Pt(9)
    cell_margin: int = Pt(4)


class ColorPalette:
    """색상 팔레트 (어두운 테마)"""

    def __init__(self):
        self._colors: Dict[str, RGBColor] = {
            'background': RGBColor(26, 27, 30),    # #1a1b1e
            'surface': RGBColor(37, 38, 43),       # #25262b
            'accent': RGBColor(34, 139, 230),      # #228be6
            'title': RGBColor(255, 255, 255),
            'text': RGBColor(193, 194, 197),       # #c1c2c5
            'muted': RGBColor(144, 146, 150),      # #909296
            'code': RGBColor(255, 212, 59),        # #ffd43b
            'white': RGBColor(255, 255, 255),
            'black': RGBColor(0, 0, 0),
        }

    def __contains__(self, key: str) -> bool:
        return key in self._colors

    def __getitem__(self, key: str) -> RGBColor:
        return self._colors.get(key, self._colors['white'])

    def get(self, key: str, default: RGBColor = None) -> RGBColor:
        return self._colors.get(key, default or self._colors['white'])


# 기본 설정 인스턴스
DEFAULT_SLIDE_CONFIG = SlideConfig()
DEFAULT_TABLE_CONFIG = TableConfig()
DEFAULT_COLORS = ColorPalette()
