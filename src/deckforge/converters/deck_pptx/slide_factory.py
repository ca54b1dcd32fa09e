"""
Slide creation factory module

Provides builders for each page descriptor kind (title, html group, image, table).
"""
import base64
import binascii
import logging
from io import BytesIO
from pathlib import Path
from typing import Any, Optional

import requests
from PIL import Image
from pptx import Presentation
from pptx.util import Inches, Pt
from pptx.enum.text import PP_ALIGN, MSO_ANCHOR
from pptx.enum.shapes import MSO_SHAPE
from pptx.dml.color import RGBColor

from .config import (
    SlideConfig,
    TableConfig,
    ColorPalette,
    DEFAULT_SLIDE_CONFIG,
    DEFAULT_TABLE_CONFIG,
    DEFAULT_COLORS,
)
from .html_text import html_to_paragraphs
from .table_builder import TableBuilder, TableDataExtractor

logger = logging.getLogger(__name__)

REQUEST_TIMEOUT = 10


class SlideFactory:
    """Slide creation factory"""

    def __init__(
        self,
        presentation: Presentation,
        slide_config: SlideConfig = None,
        colors: ColorPalette = None
    ):
        self.prs = presentation
        self.config = slide_config or DEFAULT_SLIDE_CONFIG
        self.colors = colors or DEFAULT_COLORS

    def _get_blank_slide(self):
        """Create blank layout slide with themed background"""
        slide = self.prs.slides.add_slide(self.prs.slide_layouts[6])
        fill = slide.background.fill
        fill.solid()
        fill.fore_color.rgb = self.colors['background']
        return slide

    def _add_title(self, slide, text: str, font_size: int = None) -> int:
        """Add title to slide, returns the top of the content area"""
        title_box = slide.shapes.add_textbox(
            self.config.margin_left, self.config.margin_top,
            self.config.content_width, self.config.title_height
        )
        title_frame = title_box.text_frame
        title_frame.word_wrap = True
        title_frame.text = text
        title_para = title_frame.paragraphs[0]
        title_para.font.size = font_size or self.config.title_font_size
        title_para.font.bold = True
        title_para.font.color.rgb = self.colors['title']

        return self.config.content_top

    def _add_note(self, slide, text: str, top: int, color: RGBColor = None) -> None:
        """Add a single muted line of text"""
        note_box = slide.shapes.add_textbox(
            self.config.margin_left, top,
            self.config.content_width, Inches(0.6)
        )
        note_frame = note_box.text_frame
        note_frame.word_wrap = True
        note_frame.text = text
        note_frame.paragraphs[0].font.size = self.config.body_font_size
        note_frame.paragraphs[0].font.color.rgb = color or self.colors['muted']


class TitleSlideBuilder(SlideFactory):
    """Title slide builder"""

    def create(self, title: str) -> Any:
        """Create title slide"""
        slide = self._get_blank_slide()

        banner = slide.shapes.add_shape(
            MSO_SHAPE.RECTANGLE,
            0, Inches(2.75),
            self.config.width, Inches(2)
        )
        banner.fill.solid()
        banner.fill.fore_color.rgb = self.colors['surface']
        banner.line.fill.background()

        title_frame = banner.text_frame
        title_frame.word_wrap = True
        title_frame.vertical_anchor = MSO_ANCHOR.MIDDLE
        title_frame.text = title
        title_frame.paragraphs[0].alignment = PP_ALIGN.CENTER
        title_frame.paragraphs[0].font.size = self.config.cover_font_size
        title_frame.paragraphs[0].font.bold = True
        title_frame.paragraphs[0].font.color.rgb = self.colors['title']

        return slide


class HtmlGroupSlideBuilder(SlideFactory):
    """Text content slide builder"""

    def create(self, title: str, content: str) -> Any:
        """Create slide from an HTML fragment"""
        slide = self._get_blank_slide()
        top = self._add_title(slide, title)

        text_box = slide.shapes.add_textbox(
            self.config.margin_left, top,
            self.config.content_width, self.config.content_height
        )
        text_frame = text_box.text_frame
        text_frame.word_wrap = True

        paragraphs = html_to_paragraphs(content)
        for idx, item in enumerate(paragraphs):
            paragraph = text_frame.paragraphs[0] if idx == 0 else text_frame.add_paragraph()
            paragraph.text = item.text
            paragraph.level = min(item.level, 8)
            paragraph.space_after = Pt(6)

            font = paragraph.font
            if item.heading:
                font.size = self.config.heading_font_size
                font.bold = True
                font.color.rgb = self.colors['accent']
            elif item.monospace:
                font.size = self.config.body_font_size
                font.name = self.config.code_font_name
                font.color.rgb = self.colors['code']
            else:
                font.size = self.config.body_font_size
                font.color.rgb = self.colors['text']

        return slide


class ImageSlideBuilder(SlideFactory):
    """Image slide builder"""

    def __init__(
        self,
        presentation: Presentation,
        slide_config: SlideConfig = None,
        colors: ColorPalette = None,
        base_dir: Optional[Path] = None
    ):
        super().__init__(presentation, slide_config, colors)
        self.base_dir = base_dir

    def create(self, title: str, src: str, alt: str = "") -> Any:
        """Create image slide; falls back to the alt text if the image cannot be loaded"""
        slide = self._get_blank_slide()
        top = self._add_title(slide, title)

        pil_img = self._load_image(src)
        if pil_img is None:
            self._add_note(slide, alt or src or "(image)", top)
            return slide

        img_width, img_height = pil_img.size
        available_width = self.config.content_width
        available_height = self.config.content_height

        img_ratio = img_width / img_height
        available_ratio = available_width / available_height

        if img_ratio > available_ratio:
            final_width = available_width
            final_height = int(available_width / img_ratio)
        else:
            final_height = available_height
            final_width = int(available_height * img_ratio)

        # Center alignment
        img_left = self.config.margin_left + (available_width - final_width) // 2
        img_top = top + (available_height - final_height) // 2

        img_stream = BytesIO()
        pil_img.save(img_stream, format='PNG')
        img_stream.seek(0)

        slide.shapes.add_picture(
            img_stream,
            img_left, img_top,
            final_width, final_height
        )

        logger.info(f"Image slide created: {title} ({img_width}x{img_height})")
        return slide

    def _load_image(self, src: str) -> Optional[Image.Image]:
        """Load image from a data URI, http(s) URL or local path"""
        if not src:
            return None

        try:
            data = self._read_source(src)
            if data is None:
                return None
            pil_img = Image.open(BytesIO(data))
            pil_img.load()
            if pil_img.width == 0 or pil_img.height == 0:
                return None
            if pil_img.mode not in ("RGB", "RGBA", "L", "P"):
                pil_img = pil_img.convert("RGBA")
            return pil_img
        except (
            requests.RequestException,
            OSError,
            ValueError,
            binascii.Error,
            Image.DecompressionBombError,
        ) as e:
            logger.warning(f"Failed to load image: {src[:80]}, error: {e}")
            return None

    def _read_source(self, src: str) -> Optional[bytes]:
        # data:image/png;base64,iVBORw0KG...
        if src.startswith("data:"):
            header, _, payload = src.partition(",")
            if ";base64" not in header:
                logger.warning(f"Unsupported data URI encoding: {header}")
                return None
            return base64.b64decode(payload)

        if src.startswith(("http://", "https://")):
            response = requests.get(src, timeout=REQUEST_TIMEOUT)
            response.raise_for_status()
            return response.content

        img_path = Path(src)
        if not img_path.is_absolute() and self.base_dir is not None:
            img_path = self.base_dir / img_path
        if not img_path.exists():
            logger.warning(f"Image file not found: {img_path}")
            return None
        return img_path.read_bytes()


class TableSlideBuilder(SlideFactory):
    """Table slide builder"""

    def __init__(
        self,
        presentation: Presentation,
        slide_config: SlideConfig = None,
        colors: ColorPalette = None,
        table_config: TableConfig = None
    ):
        super().__init__(presentation, slide_config, colors)
        self.table_builder = TableBuilder(table_config or DEFAULT_TABLE_CONFIG, self.colors)

    def create(self, title: str, table_html: str) -> Any:
        """Create slide from HTML table"""
        slide = self._get_blank_slide()
        top = self._add_title(slide, title)

        extractor = TableDataExtractor(table_html).extract()
        if not extractor.rows_data:
            self._add_note(slide, "(empty table)", top)
            return slide

        self.table_builder.create_table(
            slide,
            extractor.rows_data,
            extractor.header_count,
            self.config.margin_left, top,
            self.config.content_width, self.config.content_height,
        )
        return slide
