"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las estructuras de datos puras y estrictas (Pydantic v2) y los
  errores de validación como valores.
- El dominio no conoce la CLI ni el sistema de ficheros: solo conceptos del problema.
"""
