"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las figuras, los errores y las opciones de salida.
- El dominio no conoce CLI ni ficheros: solo conceptos del problema.
"""
