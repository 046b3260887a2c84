# kura_translator/translation/inventory/kura.py
"""Inventory shapes as sent by Kura devices."""
from typing import List, Optional

from pydantic import Field

from ..decoder import KuraModel


class KuraInventoryItem(KuraModel):
    name: str
    version: Optional[str] = None
    item_type: Optional[str] = Field(None, alias="type")


class KuraInventoryItems(KuraModel):
    inventory: List[KuraInventoryItem]


class KuraInventoryBundle(KuraModel):
    id: int
    name: str
    version: Optional[str] = None
    state: Optional[str] = None
    signed: Optional[bool] = None


class KuraInventoryBundles(KuraModel):
    bundles: List[KuraInventoryBundle]


class KuraInventoryContainer(KuraModel):
    name: str
    version: Optional[str] = None
    container_type: Optional[str] = Field(None, alias="type")
    state: Optional[str] = None


class KuraInventoryContainers(KuraModel):
    containers: List[KuraInventoryContainer]


class KuraInventoryPackage(KuraModel):
    name: str
    version: Optional[str] = None
    package_type: Optional[str] = Field(None, alias="type")


class KuraInventoryPackages(KuraModel):
    system_packages: List[KuraInventoryPackage] = Field(..., alias="systemPackages")
