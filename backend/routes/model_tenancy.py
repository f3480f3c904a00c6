"""
Model tenancy form: blank template, document generation, field preview.
Collaborators come from the get_* providers so tests can override them.
"""
from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Form
from fastapi.responses import Response

import deposit_schemes
from documents.field_extractor import OPTIONAL_TERM_FIELDS, ModelTenancyFieldExtractor
from errors import ModelTenancyServiceError
from models import ModelTenancy
from services import (
    DocumentGenerationService,
    DocumentType,
    ModelTenancyJsonTemplateLoader,
    ModelTenancyValidator,
)

router = APIRouter(prefix="/model-tenancy", tags=["model-tenancy"])

FILENAME_STEM = "your-tenancy-agreement"


def get_template_loader() -> ModelTenancyJsonTemplateLoader:
    return ModelTenancyJsonTemplateLoader()


def get_validator() -> ModelTenancyValidator:
    return ModelTenancyValidator()


def get_generation_service() -> DocumentGenerationService[ModelTenancy]:
    return DocumentGenerationService(
        ModelTenancyFieldExtractor(), FILENAME_STEM, ModelTenancy, excludable_fields=OPTIONAL_TERM_FIELDS
    )


@router.get("/template")
def model_tenancy_template(
    loader: ModelTenancyJsonTemplateLoader = Depends(get_template_loader),
) -> dict[str, Any]:
    """Blank tenancy the form is initialised from."""
    try:
        tenancy = loader.load_json_template()
    except RuntimeError as e:
        raise ModelTenancyServiceError("Failed to load model tenancy template") from e
    return tenancy.model_dump(mode="json", by_alias=True)


@router.post("/form")
def generate_document(
    data: str = Form(...),
    doc_type: str = Form(DocumentType.WORD.value, alias="type"),
    service: DocumentGenerationService = Depends(get_generation_service),
    validator: ModelTenancyValidator = Depends(get_validator),
) -> Response:
    """
    Validate the submitted tenancy (JSON in the "data" form field) and return
    the completed agreement as an attachment.
    """
    tenancy = service.parse(data)
    validator.validate(tenancy)
    document = service.render(tenancy, doc_type)
    return Response(
        content=document.content,
        media_type=document.media_type,
        headers={"Content-Disposition": f'attachment; filename="{document.filename}"'},
    )


@router.post("/fields")
def preview_fields(
    tenancy: ModelTenancy,
    service: DocumentGenerationService = Depends(get_generation_service),
) -> dict[str, Any]:
    """Template fields for a tenancy, without validation or rendering."""
    return service.extractor.extract_fields(tenancy)


@router.get("/deposit-schemes")
def list_deposit_schemes() -> list[dict[str, str]]:
    return [a.model_dump() for a in deposit_schemes.list_administrators()]
