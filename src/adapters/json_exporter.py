"""Exportación JSON del reporte de scaffolding.

Por qué JSON:
- Permite encadenar la CLI con otras herramientas (scripts, CI) sin parsear
  la salida de Rich.
"""

from __future__ import annotations

import json
from pathlib import Path

from core.domain.models import ScaffoldReport


def export_report_json(*, report: ScaffoldReport, output_path: Path) -> Path:
    """Exporta `ScaffoldReport` a JSON UTF-8 con formato estable."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = report.model_dump(mode="json")
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
