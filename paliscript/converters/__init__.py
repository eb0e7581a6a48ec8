from .html_converter import HtmlConverter
from .text_converter import TextConverter
from .web_converter import WebConverter

__all__ = ["HtmlConverter", "TextConverter", "WebConverter"]
