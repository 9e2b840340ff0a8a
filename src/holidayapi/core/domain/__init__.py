"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las estructuras de datos puras (Pydantic v2).
- El dominio no conoce HTTP ni la CLI: solo requests, respuestas y la
  configuración del cliente.
"""
