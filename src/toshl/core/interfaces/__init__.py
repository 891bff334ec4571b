"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan adaptadores concretos.
- Permite sustituir el transporte HTTP real por uno falso en tests.
"""
