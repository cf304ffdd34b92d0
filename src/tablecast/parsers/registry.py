"""Extension-based routing of config files to parsers."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, TypeVar

from tablecast.core.config import DecodeSettings
from tablecast.core.exceptions import UnknownExtensionError
from tablecast.core.protocols import IDataParser
from tablecast.parsers.json_parser import JSONDataParser

T = TypeVar("T")

logger = logging.getLogger(__name__)


class ParserRegistry:
    """Maps file extensions (``.json``) to the parser that handles them."""

    def __init__(self, settings: Optional[DecodeSettings] = None) -> None:
        self._settings = settings or DecodeSettings()
        self._parsers: dict[str, IDataParser] = {}

    def register(self, parser: IDataParser) -> None:
        extension = parser.file_extension_name().lower()
        if extension in self._parsers:
            logger.warning("replacing parser for %s with %s", extension, type(parser).__name__)
        self._parsers[extension] = parser

    def extensions(self) -> list[str]:
        return sorted(self._parsers)

    def for_path(self, path: str | Path) -> IDataParser:
        extension = Path(path).suffix.lower()
        try:
            return self._parsers[extension]
        except KeyError:
            raise UnknownExtensionError(f"no parser registered for {extension or '<none>'!r} ({path})") from None

    def load_file(self, path: str | Path, target_type: type[T]) -> list[T]:
        """Read ``path`` and decode it into ``target_type`` records."""
        parser = self.for_path(path)
        text = Path(path).read_text(encoding=self._settings.encoding)
        records = parser.parse(text, target_type)
        logger.info("loaded %d %s record(s) from %s", len(records), target_type.__name__, path)
        return records


def create_registry(settings: Optional[DecodeSettings] = None) -> ParserRegistry:
    """Create a registry wired with the built-in parsers."""
    if settings is None:
        settings = DecodeSettings()

    registry = ParserRegistry(settings)
    registry.register(JSONDataParser(settings=settings))
    return registry
