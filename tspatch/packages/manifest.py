# tspatch/packages/manifest.py
from __future__ import annotations
from pydantic import BaseModel, ConfigDict

__all__ = ["PackageManifest"]



class PackageManifest(BaseModel):
    """The fields of an npm package.json that package resolution relies on."""
    model_config = ConfigDict(extra="ignore")

    name: str | None = None
    version: str | None = None
