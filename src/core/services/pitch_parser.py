"""Parser de secciones del roteiro.

Convierte el texto semi-estructurado que devuelve el modelo en una secuencia
ordenada de `HeadingSection` / `PlainLineSection` para presentarlo. Es una
función pura y total: cualquier línea que no encaje se degrada a línea simple.
"""

from __future__ import annotations

import re

from core.domain.models import HeadingSection, PitchSection, PlainLineSection


# `**Etiqueta:**contenido`. El grupo de la etiqueta es lazy: manda el primer `:**`.
_HEADING_RE = re.compile(r"^\*\*(.*?):\*\*(.*)$")


def parse_pitch_line(line: str) -> PitchSection:
    match = _HEADING_RE.match(line)
    if match:
        return HeadingSection(title=match.group(1), body=match.group(2).strip())
    return PlainLineSection(text=line)


def parse_pitch(raw: str) -> list[PitchSection]:
    """Descompone `raw` en secciones, preservando el orden de las líneas.

    - Las líneas vacías (tras `strip`) se descartan.
    - Las líneas simples se devuelven tal cual, sin recortar.
    """

    return [parse_pitch_line(line) for line in raw.split("\n") if line.strip()]
