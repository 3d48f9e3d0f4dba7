"""Interfaces/abstracciones del Core.

Por qué:
- Define el contrato (Protocol) del proveedor de generación remoto.
- El orquestador depende de la abstracción; los tests usan un cliente falso.
"""
