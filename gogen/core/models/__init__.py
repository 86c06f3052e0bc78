"""
Domain models — pydantic types shared by the driver and its collaborators.

    from gogen.core.models import GeneratedFile, Package
"""

from gogen.core.models.package import Package
from gogen.core.models.template import GeneratedFile

__all__ = [
    "GeneratedFile",
    "Package",
]
