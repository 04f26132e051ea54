# -*- coding: utf-8 -*-
"""Shared response models."""

import math

from pydantic import BaseModel, Field


class Pagination(BaseModel):
    """Pagination metadata for list endpoints."""

    current_page: int = Field(..., description="Current page (1-based)")
    total_pages: int = Field(..., description="Total number of pages")
    total_items: int = Field(..., description="Total number of matching items")
    has_next_page: bool
    has_prev_page: bool

    @classmethod
    def build(cls, page: int, limit: int, total: int) -> "Pagination":
        """Compute pagination metadata from page, page size and total count."""
        total_pages = math.ceil(total / limit) if limit else 0
        return cls(
            current_page=page,
            total_pages=total_pages,
            total_items=total,
            has_next_page=page < total_pages,
            has_prev_page=page > 1,
        )