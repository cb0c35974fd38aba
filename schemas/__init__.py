"""
Validation Schemas Package

Contains Pydantic models for normalizing article metadata.
"""

from .frontmatter import FrontmatterSchema, validate_frontmatter

__all__ = ['FrontmatterSchema', 'validate_frontmatter']
