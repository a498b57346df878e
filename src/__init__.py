"""Application Layer.

Infrastructure services that orchestrate domain logic.
This layer handles file I/O and returns domain Value Objects.
"""
