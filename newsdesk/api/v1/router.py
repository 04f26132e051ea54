# -*- coding: utf-8 -*-
from fastapi import APIRouter

from newsdesk.api.v1 import (
    admin,
    articles,
    authors,
    breaking_news,
    categories,
    health,
    live_updates,
    recycle_bin,
    scheduler,
    static_pages,
    tags,
)

api_router = APIRouter()

# Health check
api_router.include_router(health.router, tags=["health"])

# Content
api_router.include_router(articles.router)
api_router.include_router(categories.router)
api_router.include_router(authors.router)
api_router.include_router(static_pages.router)
api_router.include_router(breaking_news.router)
api_router.include_router(tags.router)
api_router.include_router(live_updates.router)

# Recycle bin (soft delete) API
api_router.include_router(recycle_bin.router)

# Scheduler API
api_router.include_router(scheduler.router)

# Admin maintenance API
api_router.include_router(admin.router)
