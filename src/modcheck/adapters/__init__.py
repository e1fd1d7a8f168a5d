"""Adaptadores de I/O: cliente HTTP, mod.io y exportadores del reporte."""
