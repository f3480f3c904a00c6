"""Backend services."""

from services.document_generation import (
    DocumentGenerationService,
    DocumentType,
    GeneratedDocument,
)
from services.template_loader import ModelTenancyJsonTemplateLoader
from services.validation import ModelTenancyValidator

__all__ = [
    "DocumentGenerationService",
    "DocumentType",
    "GeneratedDocument",
    "ModelTenancyJsonTemplateLoader",
    "ModelTenancyValidator",
]
