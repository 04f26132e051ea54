# -*- coding: utf-8 -*-
"""Version 1 API routers."""
