"""
Table creation module

Converts TablePage HTML into a native PowerPoint table.
"""
import logging
from typing import List
from bs4 import BeautifulSoup, Tag
from pptx.enum.text import PP_ALIGN, MSO_ANCHOR

from .config import (
    DEFAULT_TABLE_CONFIG,
    DEFAULT_COLORS,
    TableConfig,
    ColorPalette
)
from ...segmentation.style_utils import TextUtils

logger = logging.getLogger(__name__)


class TableDataExtractor:
    """Class that extracts cell text from an HTML table"""

    def __init__(self, table_html: str):
        self.table_html = table_html
        self.rows_data: List[List[str]] = []
        self.header_count = 0
        self.max_cols = 0

    def extract(self) -> 'TableDataExtractor':
        """Extract table data"""
        soup = BeautifulSoup(self.table_html, "lxml")
        table_elem = soup.find("table")
        if table_elem is None:
            return self

        for tr in self._own_rows(table_elem):
            row_data = self._extract_row_data(tr)
            if not row_data:
                continue
            # Rows in thead, or leading rows made only of th, count as header
            is_header = tr.find_parent("thead") is not None or all(
                cell.name == "th" for cell in tr.find_all(["th", "td"], recursive=False)
            )
            if is_header and len(self.rows_data) == self.header_count:
                self.header_count += 1
            self.rows_data.append(row_data)

        # Determine and normalize column count
        if self.rows_data:
            self.max_cols = max(len(row) for row in self.rows_data)
            for row in self.rows_data:
                while len(row) < self.max_cols:
                    row.append("")

        return self

    @staticmethod
    def _own_rows(table_elem: Tag) -> List[Tag]:
        """Rows of this table only (nested tables excluded)"""
        return [
            tr for tr in table_elem.find_all("tr")
            if tr.find_parent("table") is table_elem
        ]

    @staticmethod
    def _extract_row_data(tr: Tag) -> List[str]:
        """Extract row data (including colspan handling)"""
        row_data = []
        for cell in tr.find_all(["th", "td"], recursive=False):
            row_data.append(TextUtils.clean_text(cell.get_text(" ")))
            try:
                colspan = int(cell.get("colspan", 1))
            except ValueError:
                colspan = 1
            row_data.extend([""] * max(colspan - 1, 0))
        return row_data


class TableBuilder:
    """Class that creates PowerPoint tables"""

    def __init__(
        self,
        table_config: TableConfig = None,
        colors: ColorPalette = None
    ):
        self.table_config = table_config or DEFAULT_TABLE_CONFIG
        self.colors = colors or DEFAULT_COLORS

    def create_table(
        self,
        slide,
        rows_data: List[List[str]],
        header_count: int,
        left: int,
        top: int,
        width: int,
        height: int,
    ):
        """Create PowerPoint table"""
        if not rows_data:
            return None

        max_cols = len(rows_data[0])
        row_count = len(rows_data)

        # Determine font size
        if row_count > 15 or max_cols > 6:
            base_font_size = self.table_config.small_font_size
            header_font_size = self.table_config.small_font_size
        else:
            base_font_size = self.table_config.body_font_size
            header_font_size = self.table_config.header_font_size

        height = min(self.table_config.min_row_height * row_count, height)

        ppt_table = slide.shapes.add_table(
            row_count, max_cols,
            left, top, width, height
        ).table

        for i, row_data in enumerate(rows_data):
            for j, cell_data in enumerate(row_data):
                cell = ppt_table.cell(i, j)
                cell.text = cell_data
                cell.vertical_anchor = MSO_ANCHOR.MIDDLE
                cell.margin_left = self.table_config.cell_margin
                cell.margin_right = self.table_config.cell_margin
                cell.text_frame.word_wrap = True
                cell.fill.solid()
                cell.fill.fore_color.rgb = self.colors['surface']

                for paragraph in cell.text_frame.paragraphs:
                    if i < header_count:
                        paragraph.font.size = header_font_size
                        paragraph.font.bold = True
                        paragraph.font.color.rgb = self.colors['title']
                        paragraph.alignment = PP_ALIGN.CENTER
                    else:
                        paragraph.font.size = base_font_size
                        paragraph.font.color.rgb = self.colors['text']
                        paragraph.alignment = PP_ALIGN.LEFT
                    paragraph.line_spacing = 1.1

        logger.debug(f"Table created: {row_count}x{max_cols}")
        return ppt_table
