"""Interfaces/abstracciones del Core.

Define contratos (Protocol) que implementan adaptadores concretos; el Core
depende de abstracciones, no del sistema de archivos.
"""
