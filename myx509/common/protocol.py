# common/protocol.py
from datetime import timedelta
from typing import List

from pydantic import BaseModel, IPvAnyAddress, field_validator

from myx509.config import DEFAULT_COMMON_NAME, DEFAULT_ORGANIZATION, DEFAULT_VALIDITY_DAYS


class CertificateRequest(BaseModel):
    common_name: str = DEFAULT_COMMON_NAME
    organizations: List[str] = [DEFAULT_ORGANIZATION]
    dns_names: List[str] = []
    ip_addresses: List[IPvAnyAddress] = []  # IPv4 or IPv6
    valid_for: timedelta = timedelta(days=DEFAULT_VALIDITY_DAYS)
    is_ca: bool = False

    @field_validator("valid_for")
    @classmethod
    def _positive_duration(cls, v: timedelta) -> timedelta:
        if v <= timedelta(0):
            raise ValueError("validity duration must be positive")
        return v
