"""Manifest model and loading."""

from .loader import load_manifest, manifest_from_payload
from .model import Manifest, ManifestEntry

__all__ = ["Manifest", "ManifestEntry", "load_manifest", "manifest_from_payload"]
