# -*- coding: utf-8 -*-
"""Pydantic models."""

from newsdesk.models.common import Pagination
from newsdesk.models.recycle_bin import DeletedItem, DeletedItemList, ItemType

__all__ = ["Pagination", "DeletedItem", "DeletedItemList", "ItemType"]
