"""
Batch Script Converter

Detects the kind of each source (file, directory or URL) and routes it to
the matching converter. Converted output keeps the source's name and
extension, with a suffix added, in the configured output directory.
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Optional

from .config import Config
from .converters.html_converter import HtmlConverter
from .converters.text_converter import TextConverter
from .converters.web_converter import WebConverter, url_to_filename
from .profiles import supported_scripts

logger = logging.getLogger(__name__)


@dataclass
class BatchReport:
    """Outcome of converting a directory."""
    source_directory: str
    outputs: list[str] = field(default_factory=list)
    failures: dict[str, str] = field(default_factory=dict)  # file name -> error

    @property
    def converted(self) -> int:
        return len(self.outputs)

    @property
    def failed(self) -> int:
        return len(self.failures)


class ScriptConverter:
    """
    Batch converter from romanized Pali to a target script.

    Accepts a file path, URL, or directory and produces converted text.
    """

    def __init__(self, config: Optional[Config] = None):
        self.config = config or Config()
        self.output_dir = str(self.config.output.output_dir)

    def convert(self, source: str, save: bool = True) -> str:
        """
        Convert one source.

        Args:
            source: File path or URL
            save: If True, write the output next to the other outputs

        Returns:
            The converted text

        Raises:
            ValueError: If the source is neither a file nor a URL.
            FileNotFoundError: If a file disappears before it is read.
        """
        source = source.strip()
        options = self.config.conversion

        if WebConverter.can_handle(source):
            logger.info("[URL] Converting: %s", source)
            text = WebConverter.convert(source, options)
            out_name = url_to_filename(source, self.config.output.suffix)

        elif os.path.isfile(source):
            text = self._convert_file(source)
            out_name = self.output_name(source)

        else:
            raise ValueError(
                f"Cannot handle source: {source}\n"
                f"Provide a valid file path, directory, or URL."
            )

        if save:
            self._write(out_name, text)

        return text

    def convert_directory(self, dir_path: str, save: bool = True) -> BatchReport:
        """Convert every supported file in a directory. Failures are counted, not raised."""
        report = BatchReport(source_directory=dir_path)
        supported_exts = HtmlConverter.SUPPORTED_EXTENSIONS | TextConverter.SUPPORTED_EXTENSIONS

        for filename in sorted(os.listdir(dir_path)):
            file_path = os.path.join(dir_path, filename)
            if not os.path.isfile(file_path):
                continue

            _, ext = os.path.splitext(filename.lower())
            if ext not in supported_exts:
                continue

            try:
                text = self._convert_file(file_path)
                out_name = self.output_name(file_path)
                if save:
                    self._write(out_name, text)
                report.outputs.append(out_name)
            except (OSError, ValueError) as e:
                logger.error("Failed to convert %s: %s", filename, e)
                report.failures[filename] = str(e)

        logger.info(
            "Converted %d files from %s (%d failed)",
            report.converted, dir_path, report.failed,
        )
        return report

    def output_name(self, file_path: str) -> str:
        """Output file name for a source file: <stem><suffix><ext>."""
        name, ext = os.path.splitext(os.path.basename(file_path))
        return f"{name}{self.config.output.suffix}{ext}"

    def _convert_file(self, file_path: str) -> str:
        """Route a file to the appropriate converter."""
        options = self.config.conversion
        if HtmlConverter.can_handle(file_path):
            logger.info("[HTML] Converting: %s", file_path)
            return HtmlConverter.convert(file_path, options)

        logger.info("[TXT] Converting: %s", file_path)
        return TextConverter.convert(file_path, options)

    def _write(self, out_name: str, text: str) -> str:
        os.makedirs(self.output_dir, exist_ok=True)
        out_path = os.path.join(self.output_dir, out_name)
        with open(out_path, "w", encoding="utf-8") as f:
            f.write(text)
        logger.info("[SAVED] %s", out_path)
        return out_path

    @staticmethod
    def supported_formats() -> dict:
        """Return a dictionary of all supported formats."""
        return {
            "HTML": sorted(HtmlConverter.SUPPORTED_EXTENSIONS),
            "Plain Text": sorted(TextConverter.SUPPORTED_EXTENSIONS),
            "Web Pages": ["http://", "https://"],
        }

    @staticmethod
    def supported_scripts() -> list[str]:
        return supported_scripts()
