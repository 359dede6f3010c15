"""Knowledge package - static catalogues, templates and example prompts"""
from . import catalogue, examples, templates

__all__ = ["catalogue", "examples", "templates"]
