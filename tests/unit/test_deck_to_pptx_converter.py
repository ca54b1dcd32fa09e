"""
Deck to PPTX converter 테스트
"""
import base64
from io import BytesIO

import pytest
from PIL import Image
from pptx import Presentation
from pptx.enum.shapes import MSO_SHAPE_TYPE

from deckforge.converters import DeckToPptxConverter, convert_lecture_to_pptx
from deckforge.converters.deck_pptx.html_text import TextParagraph, html_to_paragraphs
from deckforge.converters.deck_pptx.table_builder import TableDataExtractor
from deckforge.core.document import Deck, HtmlGroupPage, ImagePage, TablePage, TitlePage


def png_bytes(width: int = 4, height: int = 3) -> bytes:
    """작은 PNG 이미지 생성"""
    stream = BytesIO()
    Image.new("RGB", (width, height), (200, 30, 30)).save(stream, format="PNG")
    return stream.getvalue()


def has_picture(slide) -> bool:
    return any(shape.shape_type == MSO_SHAPE_TYPE.PICTURE for shape in slide.shapes)


def has_table(slide) -> bool:
    return any(shape.has_table for shape in slide.shapes)


class TestDeckToPptxConverter:
    """DeckToPptxConverter 테스트"""

    @pytest.fixture
    def image_dir(self, tmp_path):
        (tmp_path / "pic.png").write_bytes(png_bytes())
        return tmp_path

    @pytest.fixture
    def deck(self):
        data_uri = "data:image/png;base64," + base64.b64encode(png_bytes()).decode("ascii")
        return Deck(pages=[
            TitlePage(title="Lecture 1"),
            HtmlGroupPage(title="Lecture 1", content="<h2>Intro</h2>\n<ul><li>One</li></ul>"),
            ImagePage(title="Lecture 1", src=data_uri, alt="inline"),
            ImagePage(title="Lecture 1", src="pic.png", alt="local"),
            ImagePage(title="Lecture 1", src="missing.png", alt="Missing diagram"),
            TablePage(title="Lecture 1", content="<table><tr><th>A</th></tr><tr><td>1</td></tr></table>"),
        ])

    def test_converter_initialization(self):
        """컨버터 초기화 테스트"""
        converter = DeckToPptxConverter()
        assert converter.colors is not None
        assert 'background' in converter.colors

    def test_one_slide_per_page(self, deck, image_dir):
        output_path = image_dir / "deck.pptx"

        DeckToPptxConverter().convert(deck, output_path, base_dir=image_dir)

        assert output_path.exists()
        prs = Presentation(str(output_path))
        slides = list(prs.slides)
        assert len(slides) == deck.page_count

    def test_image_slides(self, deck, image_dir):
        output_path = image_dir / "deck.pptx"
        DeckToPptxConverter().convert(deck, output_path, base_dir=image_dir)

        slides = list(Presentation(str(output_path)).slides)
        assert has_picture(slides[2])
        assert has_picture(slides[3])
        # 불러올 수 없는 이미지는 alt 텍스트로 대체
        assert not has_picture(slides[4])
        texts = [shape.text_frame.text for shape in slides[4].shapes if shape.has_text_frame]
        assert "Missing diagram" in texts

    def test_oversized_image_falls_back_to_alt_text(self, tmp_path, monkeypatch):
        """픽셀 수 제한을 넘는 이미지도 변환을 멈추지 않음"""
        monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 1000)
        data_uri = "data:image/png;base64," + base64.b64encode(png_bytes(100, 100)).decode("ascii")
        deck = Deck(pages=[
            ImagePage(title="Lecture 1", src=data_uri, alt="Huge diagram"),
            TitlePage(title="Lecture 2"),
        ])
        output_path = tmp_path / "bomb.pptx"

        DeckToPptxConverter().convert(deck, output_path)

        slides = list(Presentation(str(output_path)).slides)
        assert len(slides) == 2
        assert not has_picture(slides[0])
        texts = [shape.text_frame.text for shape in slides[0].shapes if shape.has_text_frame]
        assert "Huge diagram" in texts

    def test_table_slide(self, deck, image_dir):
        output_path = image_dir / "deck.pptx"
        DeckToPptxConverter().convert(deck, output_path, base_dir=image_dir)

        slides = list(Presentation(str(output_path)).slides)
        assert has_table(slides[5])

    def test_empty_deck(self, tmp_path):
        output_path = tmp_path / "empty.pptx"
        DeckToPptxConverter().convert(Deck(), output_path)

        assert len(Presentation(str(output_path)).slides) == 0

    def test_convert_lecture_to_pptx_function(self, tmp_path):
        """편의 함수 테스트"""
        (tmp_path / "pic.png").write_bytes(png_bytes())
        html_path = tmp_path / "lecture.html"
        html_path.write_text(
            '<html><body><table class="generaltable">'
            "<thead><tr><th>Topic</th></tr></thead>"
            '<tbody><tr><td><div class="no-overflow">'
            '<p>Hello <img src="pic.png" alt="P"></p>'
            "</div></td></tr></tbody></table></body></html>",
            encoding="utf-8",
        )
        output_path = tmp_path / "lecture.pptx"

        convert_lecture_to_pptx(html_path, output_path)

        slides = list(Presentation(str(output_path)).slides)
        assert len(slides) == 3
        assert has_picture(slides[1])


class TestHtmlToParagraphs:
    """HTML 조각 -> 문단 변환 테스트"""

    def test_heading_and_lists(self):
        paragraphs = html_to_paragraphs(
            "<h2>Title</h2>\n<ul><li>One</li><li>Two<ul><li>Sub</li></ul></li></ul>"
            "<ol><li>First</li></ol>"
        )

        assert paragraphs == [
            TextParagraph(text="Title", heading=True),
            TextParagraph(text="• One"),
            TextParagraph(text="• Two"),
            TextParagraph(text="• Sub", level=1),
            TextParagraph(text="1. First"),
        ]

    def test_plain_text_fragment(self):
        assert html_to_paragraphs("Loose text") == [TextParagraph(text="Loose text")]

    def test_preformatted(self):
        paragraphs = html_to_paragraphs("<pre><code>a = 1\n\nb = 2</code></pre>")
        assert paragraphs == [
            TextParagraph(text="a = 1", monospace=True),
            TextParagraph(text="b = 2", monospace=True),
        ]

    def test_empty(self):
        assert html_to_paragraphs("   ") == []


class TestTableDataExtractor:
    """TableDataExtractor 테스트"""

    def test_header_and_colspan(self):
        extractor = TableDataExtractor(
            "<table><thead><tr><th>A</th><th>B</th></tr></thead>"
            '<tbody><tr><td colspan="2">x</td></tr><tr><td>1</td></tr></tbody></table>'
        ).extract()

        assert extractor.rows_data == [["A", "B"], ["x", ""], ["1", ""]]
        assert extractor.header_count == 1
        assert extractor.max_cols == 2

    def test_not_a_table(self):
        extractor = TableDataExtractor("<p>nope</p>").extract()
        assert extractor.rows_data == []


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
