"""Request options for the MinerU ``/file_parse`` endpoint.

ParseRequest is an immutable pydantic model holding every option the
service accepts. ParseRequestBuilder offers a fluent way to assemble one
with the service defaults.
"""

from typing import IO, Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from mineru_client.errors import InvalidRequestError

# Service defaults
DEFAULT_OUTPUT_DIR = "./output"
DEFAULT_LANG_LIST = ("ch",)
DEFAULT_BACKEND = "pipeline"
DEFAULT_PARSE_METHOD = "auto"
DEFAULT_START_PAGE_ID = 0
DEFAULT_END_PAGE_ID = 99999

FileInput = IO[bytes] | bytes


class ParseRequest(BaseModel):
    """Options for a single ``/file_parse`` submission.

    Field names match the multipart field names the service expects.
    Constraint checks on files and page range run in ``ensure_valid`` so a
    request can be inspected before it is submitted.

    Attributes:
        files: Binary streams or raw bytes to parse, in submission order.
        output_dir: Server-side output directory.
        lang_list: OCR language codes.
        backend: Backend engine identifier.
        parse_method: Parsing strategy (auto, txt, ocr).
        formula_enable: Enable formula extraction.
        table_enable: Enable table extraction.
        server_url: Optional URL of a remote VLM server used by the backend.
        return_md: Return markdown content.
        return_middle_json: Return intermediate JSON.
        return_model_output: Return raw model output.
        return_content_list: Return the content list.
        return_images: Return extracted images.
        response_format_zip: Return a ZIP archive instead of JSON.
        start_page_id: First page to parse (0-based).
        end_page_id: Last page to parse.
    """

    model_config = ConfigDict(frozen=True)

    files: tuple[Any, ...] = Field(default=(), description="Binary streams or bytes to parse")
    output_dir: str = DEFAULT_OUTPUT_DIR
    lang_list: tuple[str, ...] = DEFAULT_LANG_LIST
    backend: str = DEFAULT_BACKEND
    parse_method: str = DEFAULT_PARSE_METHOD
    formula_enable: bool = True
    table_enable: bool = True
    server_url: str | None = None
    return_md: bool = True
    return_middle_json: bool = False
    return_model_output: bool = False
    return_content_list: bool = False
    return_images: bool = False
    response_format_zip: bool = False
    start_page_id: int = DEFAULT_START_PAGE_ID
    end_page_id: int = DEFAULT_END_PAGE_ID

    @field_validator("files", "lang_list", mode="before")
    @classmethod
    def to_tuple(cls, v: Any) -> Any:
        """Freeze list inputs so the request cannot change after creation."""
        if isinstance(v, list):
            return tuple(v)
        return v

    @classmethod
    def create(cls, file: FileInput | None = None) -> "ParseRequestBuilder":
        """Start a builder, optionally seeded with a first file.

        Args:
            file: Optional first file to add.

        Returns:
            A new ParseRequestBuilder.
        """
        builder = ParseRequestBuilder()
        if file is not None:
            builder.with_file(file)
        return builder

    def ensure_valid(self) -> None:
        """Check the request before it is sent.

        Raises:
            InvalidRequestError: If files are missing or null, no language is
                given, or the page range is invalid.
        """
        if not self.files:
            raise InvalidRequestError("At least one file is required.", field="files")

        if any(f is None for f in self.files):
            raise InvalidRequestError("All files must be non-null.", field="files")

        if not self.lang_list:
            raise InvalidRequestError("At least one language is required.", field="lang_list")

        if self.start_page_id < 0:
            raise InvalidRequestError(
                "Start page ID (start_page_id) must be non-negative.",
                field="start_page_id",
            )

        if self.end_page_id < self.start_page_id:
            raise InvalidRequestError(
                "End page ID (end_page_id) must be greater than or equal to start page ID.",
                field="end_page_id",
            )


class ParseRequestBuilder:
    """Fluent builder for ParseRequest.

    Every ``with_*`` method returns the builder so calls can be chained::

        request = (
            ParseRequest.create(stream)
            .with_languages("en")
            .with_table_enabled(False)
            .build()
        )
    """

    def __init__(self) -> None:
        self._files: list[FileInput] = []
        self._options: dict[str, Any] = {}

    def with_file(self, file: FileInput) -> "ParseRequestBuilder":
        if file is None:
            raise InvalidRequestError("File cannot be None.", field="files")
        self._files.append(file)
        return self

    def with_files(self, *files: FileInput) -> "ParseRequestBuilder":
        # None entries are kept so ensure_valid reports them at submit time
        self._files.extend(files)
        return self

    def with_output_dir(self, output_dir: str) -> "ParseRequestBuilder":
        if output_dir is None:
            raise InvalidRequestError("Output directory cannot be None.", field="output_dir")
        self._options["output_dir"] = output_dir
        return self

    def with_languages(self, *languages: str) -> "ParseRequestBuilder":
        if not languages:
            raise InvalidRequestError("At least one language is required.", field="lang_list")
        self._options["lang_list"] = tuple(languages)
        return self

    def with_backend(self, backend: str) -> "ParseRequestBuilder":
        if backend is None:
            raise InvalidRequestError("Backend cannot be None.", field="backend")
        self._options["backend"] = backend
        return self

    def with_parse_method(self, parse_method: str) -> "ParseRequestBuilder":
        if parse_method is None:
            raise InvalidRequestError("Parse method cannot be None.", field="parse_method")
        self._options["parse_method"] = parse_method
        return self

    def with_formula_enabled(self, enable: bool = True) -> "ParseRequestBuilder":
        self._options["formula_enable"] = enable
        return self

    def with_table_enabled(self, enable: bool = True) -> "ParseRequestBuilder":
        self._options["table_enable"] = enable
        return self

    def with_server_url(self, server_url: str | None) -> "ParseRequestBuilder":
        self._options["server_url"] = server_url
        return self

    def with_markdown(self, enable: bool = True) -> "ParseRequestBuilder":
        self._options["return_md"] = enable
        return self

    def with_middle_json(self, enable: bool = True) -> "ParseRequestBuilder":
        self._options["return_middle_json"] = enable
        return self

    def with_model_output(self, enable: bool = True) -> "ParseRequestBuilder":
        self._options["return_model_output"] = enable
        return self

    def with_content_list(self, enable: bool = True) -> "ParseRequestBuilder":
        self._options["return_content_list"] = enable
        return self

    def with_images(self, enable: bool = True) -> "ParseRequestBuilder":
        self._options["return_images"] = enable
        return self

    def with_zip_response(self, enable: bool = True) -> "ParseRequestBuilder":
        self._options["response_format_zip"] = enable
        return self

    def with_page_range(self, start_page: int, end_page: int) -> "ParseRequestBuilder":
        """Restrict parsing to pages ``start_page`` through ``end_page``.

        Raises:
            InvalidRequestError: If the range is negative or inverted.
        """
        if start_page < 0:
            raise InvalidRequestError("Start page must be non-negative.", field="start_page_id")
        if end_page < start_page:
            raise InvalidRequestError(
                "End page must be greater than or equal to start page.",
                field="end_page_id",
            )
        self._options["start_page_id"] = start_page
        self._options["end_page_id"] = end_page
        return self

    def build(self) -> ParseRequest:
        """Create the immutable ParseRequest."""
        return ParseRequest(files=tuple(self._files), **self._options)
