"""Modelos y entidades del dominio.

Aquí viven las estructuras de datos puras (Pydantic v2) y funciones puras.
El dominio no conoce la CLI ni el sistema de archivos: solo conceptos del problema.
"""
