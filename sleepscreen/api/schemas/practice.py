"""Schemas describing the practice header and breadcrumb strip."""
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel


class BreadcrumbItem(BaseModel):
    label: str
    href: Optional[str] = None
    current: bool = False


class PracticeInfo(BaseModel):
    name: str
    specialty: str
    initials: str
    phone: str
    actions: List[str]
    navigation: List[str]
    breadcrumb: List[BreadcrumbItem]
