"""Exportación JSON de payloads.

Por qué JSON:
- Interoperabilidad con otras herramientas y pipelines.
- Permite guardar una respuesta sin volver a consultar el servicio (cada
  llamada consume cuota de la key).
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any


def export_payload_json(*, payload: Any, output_path: Path) -> Path:
    """Write `payload` as UTF-8 JSON with a stable layout."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True, default=str) + "\n",
        encoding="utf-8",
    )
    return output_path
