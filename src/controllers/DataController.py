from .BaseController import BaseController
from helpers.errors import ValidationError, PayloadTooLargeError
from python_multipart.exceptions import MultipartParseError
from python_multipart.multipart import MultipartParser, parse_options_header
from typing import AsyncIterator, Callable, Optional, Tuple
import os

import logging
logger = logging.getLogger(__name__)


class FilePartCollector:
    """Multipart callbacks that keep a single file field in memory.

    The part's declared type is checked as soon as its headers are parsed,
    before any content is kept, and the buffer never grows past `max_size`.
    Other fields are skipped.
    """

    def __init__(self, field_name: str, max_size: int,
                 validate: Callable[[Optional[str], Optional[str]], None],
                 too_large_message: str):
        self.field_name = field_name
        self.max_size = max_size
        self.validate = validate
        self.too_large_message = too_large_message

        self.found = False
        self.filename = None
        self.content_type = None
        self.size = 0

        self._chunks = []
        self._capturing = False
        self._headers = {}
        self._header_field = b""
        self._header_value = b""

    @property
    def content(self) -> bytes:
        return b"".join(self._chunks)

    def callbacks(self) -> dict:
        return {
            "on_part_begin": self.on_part_begin,
            "on_header_field": self.on_header_field,
            "on_header_value": self.on_header_value,
            "on_header_end": self.on_header_end,
            "on_headers_finished": self.on_headers_finished,
            "on_part_data": self.on_part_data,
            "on_part_end": self.on_part_end,
        }

    def on_part_begin(self):
        self._headers = {}
        self._capturing = False

    def on_header_field(self, data: bytes, start: int, end: int):
        self._header_field += data[start:end]

    def on_header_value(self, data: bytes, start: int, end: int):
        self._header_value += data[start:end]

    def on_header_end(self):
        self._headers[self._header_field.lower()] = self._header_value
        self._header_field = b""
        self._header_value = b""

    def on_headers_finished(self):
        _, options = parse_options_header(self._headers.get(b"content-disposition", b""))
        name = options.get(b"name", b"").decode("utf-8", errors="replace")
        filename = options.get(b"filename", b"").decode("utf-8", errors="replace")

        # browsers send an empty filename when no file was picked
        if self.found or name != self.field_name or not filename:
            return

        content_type = self._headers.get(b"content-type", b"").decode("latin-1") or None
        self.validate(content_type, filename)

        self.found = True
        self.filename = filename
        self.content_type = content_type
        self._capturing = True

    def on_part_data(self, data: bytes, start: int, end: int):
        if not self._capturing:
            return

        self.size += end - start
        if self.size > self.max_size:
            raise PayloadTooLargeError(self.too_large_message)
        self._chunks.append(data[start:end])

    def on_part_end(self):
        self._capturing = False


class DataController(BaseController):

    @property
    def too_large_message(self) -> str:
        return f"File too large. Max size is {self.app_settings.max_file_size_mb}MB."

    def is_allowed_file(self, content_type: Optional[str], filename: Optional[str]) -> bool:
        media_type = (content_type or "").split(";")[0].strip().lower()
        if media_type in self.app_settings.ALLOWED_FILE_TYPES:
            return True

        extension = os.path.splitext(filename or "")[1].lower()
        return extension in self.app_settings.ALLOWED_FILE_EXTENSIONS

    def validate_file(self, content_type: Optional[str], filename: Optional[str], size: Optional[int] = None):
        """Check declared type first, then size; nothing is read here."""
        if not self.is_allowed_file(content_type, filename):
            raise ValidationError("Only text files are allowed")

        if size is not None and size > self.app_settings.MAX_FILE_SIZE:
            raise PayloadTooLargeError(self.too_large_message)

    async def read_upload(self, stream: AsyncIterator[bytes], content_type_header: Optional[str],
                          field_name: str = "transcript") -> Optional[FilePartCollector]:
        """Parse a multipart body from `stream` into memory.

        Returns the collected file part, or None when the body is not
        multipart or carries no file under `field_name`.
        """
        media_type, params = parse_options_header(content_type_header or "")
        boundary = params.get(b"boundary")
        if media_type != b"multipart/form-data" or not boundary:
            return None

        collector = FilePartCollector(
            field_name=field_name,
            max_size=self.app_settings.MAX_FILE_SIZE,
            validate=self.validate_file,
            too_large_message=self.too_large_message,
        )
        parser = MultipartParser(boundary, callbacks=collector.callbacks())

        try:
            async for chunk in stream:
                if chunk:
                    parser.write(chunk)
            parser.finalize()
        except MultipartParseError as e:
            logger.warning(f"Malformed multipart upload: {e}")
            raise ValidationError("Malformed upload body") from e

        if not collector.found:
            return None

        return collector

    def extract_text(self, content: bytes, content_type: Optional[str], filename: Optional[str]) -> Tuple[str, str]:
        self.validate_file(content_type, filename, len(content))

        try:
            transcript = content.decode("utf-8")
        except UnicodeDecodeError as e:
            logger.warning(f"Rejected non UTF-8 upload {filename}: {e}")
            raise ValidationError("File is not valid UTF-8 text") from e

        logger.info(f"Extracted {len(transcript)} characters from {filename}")
        return transcript, filename
