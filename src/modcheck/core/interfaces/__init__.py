"""Interfaces/abstracciones del Core.

- Contratos (Protocol) que implementan los adaptadores concretos.
- El reconciliador depende de `ModSource`, no de mod.io.
"""

from modcheck.core.interfaces.mod_source import ModSource

__all__ = ["ModSource"]
