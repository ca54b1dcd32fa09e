"""
슬라이드 덱(Deck)을 PowerPoint(.pptx)로 변환하는 컨버터

페이지 디스크립터 타입별로 슬라이드 빌더를 골라 슬라이드를 생성합니다.
"""
import logging
from pathlib import Path
from typing import Optional

from pptx import Presentation

from ...core.document import Deck, HtmlGroupPage, ImagePage, PageDescriptor, TablePage, TitlePage
from ...parsers.lecture_parser import LectureParser
from .config import (
    SlideConfig,
    TableConfig,
    ColorPalette,
    DEFAULT_SLIDE_CONFIG,
    DEFAULT_TABLE_CONFIG,
    DEFAULT_COLORS
)
from .slide_factory import (
    TitleSlideBuilder,
    HtmlGroupSlideBuilder,
    ImageSlideBuilder,
    TableSlideBuilder,
)

logger = logging.getLogger(__name__)


class DeckToPptxConverter:
    """Deck을 PowerPoint로 변환하는 컨버터"""

    def __init__(
        self,
        slide_config: SlideConfig = None,
        table_config: TableConfig = None,
        colors: ColorPalette = None
    ):
        """
        컨버터 초기화

        Args:
            slide_config: 슬라이드 레이아웃 설정
            table_config: 테이블 설정
            colors: 색상 팔레트
        """
        self.slide_config = slide_config or DEFAULT_SLIDE_CONFIG
        self.table_config = table_config or DEFAULT_TABLE_CONFIG
        self.colors = colors or DEFAULT_COLORS

        self.prs: Optional[Presentation] = None

        # 슬라이드 빌더들 (convert 시 초기화)
        self._title_builder: Optional[TitleSlideBuilder] = None
        self._html_builder: Optional[HtmlGroupSlideBuilder] = None
        self._image_builder: Optional[ImageSlideBuilder] = None
        self._table_builder: Optional[TableSlideBuilder] = None

    def convert(self, deck: Deck, output_path: Path, base_dir: Optional[Path] = None) -> Path:
        """
        Deck을 PPTX 파일로 저장

        Args:
            deck: 변환할 슬라이드 덱
            output_path: 출력 PPTX 파일 경로
            base_dir: 상대 경로 이미지의 기준 디렉토리 (없으면 원본 HTML 위치)

        Returns:
            저장된 파일 경로
        """
        output_path = Path(output_path)
        if base_dir is None and deck.source_path is not None:
            base_dir = Path(deck.source_path).absolute().parent

        logger.info(f"Deck -> PPTX 변환 시작: {deck.page_count}개 페이지 -> {output_path}")

        self.prs = Presentation()
        self.prs.slide_width = self.slide_config.width
        self.prs.slide_height = self.slide_config.height
        self._init_builders(base_dir)

        for page in deck.pages:
            self._create_slide(page)

        self.prs.save(str(output_path))
        logger.info(f"변환 완료: {output_path} (총 {len(self.prs.slides)}개 슬라이드)")
        return output_path

    def _init_builders(self, base_dir: Optional[Path]) -> None:
        """슬라이드 빌더 초기화"""
        self._title_builder = TitleSlideBuilder(
            self.prs, self.slide_config, self.colors
        )
        self._html_builder = HtmlGroupSlideBuilder(
            self.prs, self.slide_config, self.colors
        )
        self._image_builder = ImageSlideBuilder(
            self.prs, self.slide_config, self.colors, base_dir
        )
        self._table_builder = TableSlideBuilder(
            self.prs, self.slide_config, self.colors, self.table_config
        )

    def _create_slide(self, page: PageDescriptor) -> None:
        """페이지 타입별 슬라이드 생성"""
        if isinstance(page, TitlePage):
            self._title_builder.create(page.title)
        elif isinstance(page, HtmlGroupPage):
            self._html_builder.create(page.title, page.content)
        elif isinstance(page, ImagePage):
            self._image_builder.create(page.title, page.src, page.alt)
        elif isinstance(page, TablePage):
            self._table_builder.create(page.title, page.content)
        else:
            raise TypeError(f"알 수 없는 페이지 타입: {type(page).__name__}")


def convert_lecture_to_pptx(html_path: Path, output_path: Path) -> Path:
    """
    강의 HTML 파일을 PPTX로 변환하는 편의 함수

    Args:
        html_path: 입력 HTML 파일 경로
        output_path: 출력 PPTX 파일 경로

    Returns:
        저장된 파일 경로
    """
    deck = LectureParser().parse(Path(html_path))
    return DeckToPptxConverter().convert(deck, output_path)
