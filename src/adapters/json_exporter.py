"""Exportación JSON del resultado.

Por qué JSON:
- Modo no interactivo para pipelines/scripts (`--json` en la CLI).
- Incluye las secciones ya parseadas para no repetir el parser en el consumidor.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import TypeAdapter

from core.domain.models import GenerationResult, PitchSection
from core.services.pitch_parser import parse_pitch


_SECTIONS_ADAPTER: TypeAdapter[list[PitchSection]] = TypeAdapter(list[PitchSection])


def result_to_payload(result: GenerationResult) -> dict[str, Any]:
    payload = result.model_dump(mode="json")
    payload["sections"] = _SECTIONS_ADAPTER.dump_python(parse_pitch(result.pitch_text), mode="json")
    return payload


def dump_result_json(result: GenerationResult) -> str:
    """Serializa `GenerationResult` + secciones a JSON UTF-8 con formato estable."""

    return json.dumps(result_to_payload(result), ensure_ascii=False, indent=2, sort_keys=True)
