# kura_translator/translation/keystore/kura.py
"""Keystore shapes as sent by Kura devices."""
from typing import List, Optional

from pydantic import Field, RootModel

from ..decoder import KuraModel


class KuraKeystore(KuraModel):
    keystore_service_pid: str = Field(..., alias="keystoreServicePid")
    keystore_type: Optional[str] = Field(None, alias="type")
    size: Optional[int] = None


class KuraKeystores(RootModel[List[KuraKeystore]]):
    pass


class KuraKeystoreSubjectAN(KuraModel):
    an_type: Optional[str] = Field(None, alias="type")
    value: Optional[str] = None


class KuraKeystoreItem(KuraModel):
    keystore_service_pid: Optional[str] = Field(None, alias="keystoreServicePid")
    alias: str
    item_type: Optional[str] = Field(None, alias="type")
    size: Optional[int] = None
    algorithm: Optional[str] = None
    subject_dn: Optional[str] = Field(None, alias="subjectDN")
    subject_an: Optional[List[KuraKeystoreSubjectAN]] = Field(None, alias="subjectAN")
    issuer: Optional[str] = None
    start_date: Optional[int] = Field(None, alias="startDate")  # epoch millis
    expiration_date: Optional[int] = Field(None, alias="expirationDate")  # epoch millis
    certificate: Optional[str] = None
    certificate_chain: Optional[List[str]] = Field(None, alias="certificateChain")


class KuraKeystoreItems(RootModel[List[KuraKeystoreItem]]):
    pass
