# src/pantone_tcx_matcher/catalog/types.py
"""
types.py.

Does: Define the immutable catalog record shared by the loader, lookups and matcher.
"""

from __future__ import annotations

from typing import NamedTuple

from pantone_tcx_matcher.color.conversion import RGB, parse_hex

__all__ = ["CatalogEntry", "Catalog"]
__docformat__ = "google"


class CatalogEntry(NamedTuple):
    """One reference color: display name, TCX code ("NN-NNNN") and canonical "#RRGGBB".

    Neither name nor code is guaranteed unique across a catalog.
    """

    name: str
    code: str
    hex: str

    @property
    def rgb(self) -> RGB:
        return parse_hex(self.hex)

    def to_dict(self) -> dict[str, str]:
        return {"name": self.name, "code": self.code, "hex": self.hex}


Catalog = tuple[CatalogEntry, ...]
