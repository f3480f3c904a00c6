"""
Turn a submitted form into a downloadable agreement: parse, extract fields, render.
Validation is done by the caller before render().
"""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, Iterable, Type, TypeVar

from pydantic import BaseModel, ValidationError

from documents.docx_builder import build_docx
from errors import InvalidSubmissionError, UnsupportedDocumentTypeError

logger = logging.getLogger(__name__)

DOCX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

M = TypeVar("M", bound=BaseModel)


class DocumentType(str, Enum):
    WORD = "WORD"


@dataclass
class GeneratedDocument:
    content: bytes
    media_type: str
    filename: str


class DocumentGenerationService(Generic[M]):
    """
    Generic over the form model so other housing forms can reuse it with their
    own extractor and filename stem. excludable_fields are the extracted fields a
    submission may blank through its excluded_terms list.
    """

    def __init__(
        self,
        extractor: Any,
        filename_stem: str,
        model_class: Type[M],
        template_text: str | None = None,
        excludable_fields: Iterable[str] = (),
    ):
        self.extractor = extractor
        self.filename_stem = filename_stem
        self.model_class = model_class
        self.template_text = template_text
        self.excludable_fields = frozenset(excludable_fields)

    def parse(self, data: str | bytes | dict) -> M:
        try:
            if isinstance(data, (str, bytes)):
                return self.model_class.model_validate_json(data)
            return self.model_class.model_validate(data)
        except ValidationError as e:
            raise InvalidSubmissionError(f"Invalid {self.model_class.__name__} data: {e}") from e

    def render(self, model: M, doc_type: str = DocumentType.WORD.value) -> GeneratedDocument:
        try:
            document_type = DocumentType((doc_type or DocumentType.WORD.value).upper())
        except ValueError as e:
            raise UnsupportedDocumentTypeError(f"Unsupported document type: {doc_type}") from e

        start = time.perf_counter()
        fields = self.extractor.extract_fields(model)
        # Excluded fields are blanked so their sections drop out of the document
        for name in getattr(model, "excluded_terms", []):
            if name in self.excludable_fields:
                fields[name] = ""
        content = build_docx(
            fields,
            template_text=self.template_text,
            additional_terms=getattr(model, "additional_terms", []),
        )
        logger.info(
            "[generate] %s type=%s fields=%d bytes=%d duration=%.2fs",
            self.filename_stem,
            document_type.value,
            len(fields),
            len(content),
            time.perf_counter() - start,
        )
        return GeneratedDocument(
            content=content,
            media_type=DOCX_MEDIA_TYPE,
            filename=f"{self.filename_stem}.docx",
        )
