"""Parsers module"""
from .lecture_parser import LectureParser, build_pages, is_lecture_page

__all__ = [
    "LectureParser",
    "build_pages",
    "is_lecture_page",
]
