"""
Moodle lecture page parser
"""
from pathlib import Path
from typing import List, Optional
import logging
from bs4 import BeautifulSoup, Tag

from ..core.document import Deck, PageDescriptor, TitlePage
from ..core.parser import BaseParser
from ..segmentation.block_extractor import BlockExtractor
from ..segmentation.config import (
    SegmentationConfig,
    SelectorConfig,
    DEFAULT_SEGMENTATION_CONFIG,
    DEFAULT_SELECTOR_CONFIG,
)
from ..segmentation.slide_grouper import SlideGrouper

logger = logging.getLogger(__name__)


def is_lecture_page(soup: BeautifulSoup, selectors: SelectorConfig = None) -> bool:
    """Check for the Moodle lesson page marker"""
    selectors = selectors or DEFAULT_SELECTOR_CONFIG
    return soup.select_one(selectors.page_marker) is not None


def build_pages(
    document: Tag,
    selectors: SelectorConfig = None,
    segmentation: SegmentationConfig = None,
) -> List[PageDescriptor]:
    """
    Build the page sequence for every lecture table in the document.

    Each lecture table yields a title page followed by its content pages.
    A table without a content cell contributes only its title page.
    """
    selectors = selectors or DEFAULT_SELECTOR_CONFIG
    segmentation = segmentation or DEFAULT_SEGMENTATION_CONFIG
    extractor = BlockExtractor()
    pages: List[PageDescriptor] = []

    for table in document.select(selectors.unit_selector):
        title = _extract_title(table, selectors)
        pages.append(TitlePage(title=title))

        content_cell = _find_content_cell(table, selectors)
        if content_cell is None:
            logger.debug(f"No content cell in lecture table: {title}")
            continue

        blocks = extractor.extract(content_cell.children)
        pages.extend(SlideGrouper(title, segmentation).group(blocks))

    return pages


def _extract_title(table: Tag, selectors: SelectorConfig) -> str:
    header_cell = table.select_one(selectors.header_selector)
    if header_cell is None:
        return selectors.untitled_title
    return header_cell.get_text().strip()


def _find_content_cell(table: Tag, selectors: SelectorConfig) -> Optional[Tag]:
    for selector in selectors.content_selectors:
        cell = table.select_one(selector)
        if cell is not None:
            return cell
    return None


class LectureParser(BaseParser):
    """Moodle lecture page parser"""

    def __init__(
        self,
        selectors: SelectorConfig = None,
        segmentation: SegmentationConfig = None,
    ):
        self.selectors = selectors or DEFAULT_SELECTOR_CONFIG
        self.segmentation = segmentation or DEFAULT_SEGMENTATION_CONFIG

    @property
    def supported_extensions(self) -> List[str]:
        return [".html", ".htm"]

    def parse(self, file_path: Path) -> Deck:
        """Parse lecture HTML file"""
        file_path = Path(file_path)
        html_content = self.read_file(file_path)
        return self.parse_html(html_content, source_path=file_path)

    def parse_html(self, html: str, source_path: Optional[Path] = None) -> Deck:
        """Parse lecture HTML string"""
        soup = BeautifulSoup(html, "lxml")

        if not is_lecture_page(soup, self.selectors):
            logger.warning(
                f"Moodle page marker not found ({self.selectors.page_marker}), "
                f"parsing anyway: {source_path or '<string>'}"
            )

        unit_count = len(soup.select(self.selectors.unit_selector))
        pages = build_pages(soup, self.selectors, self.segmentation)

        logger.info(f"Lecture parsed: {unit_count} lecture table(s), {len(pages)} page(s)")
        if not pages:
            logger.warning(f"Nothing to display: no '{self.selectors.unit_selector}' found")

        return Deck(pages=pages, source_path=source_path, unit_count=unit_count)
