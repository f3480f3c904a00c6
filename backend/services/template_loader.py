"""Load the blank model tenancy the form starts from."""
from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from pydantic import ValidationError

from errors import TemplateLoadError
from models import ModelTenancy

logger = logging.getLogger(__name__)

_TEMPLATE_DIR = Path(__file__).resolve().parent / "templates"
TEMPLATE_JSON_PATH = Path(os.environ.get("MODEL_TENANCY_TEMPLATE_JSON", "") or _TEMPLATE_DIR / "model_tenancy.json")


class ModelTenancyJsonTemplateLoader:

    def __init__(self, path: Path | None = None):
        self.path = path or TEMPLATE_JSON_PATH

    def load_json_template(self) -> ModelTenancy:
        """Parse the JSON template. Raises TemplateLoadError (a RuntimeError)."""
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except OSError as e:
            raise TemplateLoadError(f"Cannot read template {self.path}: {e}") from e
        except ValueError as e:
            raise TemplateLoadError(f"Invalid JSON in template {self.path}: {e}") from e
        try:
            tenancy = ModelTenancy.model_validate(raw)
        except ValidationError as e:
            raise TemplateLoadError(f"Template {self.path} does not match the form: {e}") from e
        logger.debug("Loaded model tenancy template from %s", self.path)
        return tenancy
