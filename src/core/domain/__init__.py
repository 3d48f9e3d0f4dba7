"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las estructuras puras (Pydantic v2): resultado, secciones, errores.
- El dominio no conoce HTTP, CLI, ni el SDK del proveedor IA.
"""
