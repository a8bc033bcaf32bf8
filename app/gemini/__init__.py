# -*- coding: utf-8 -*-
"""
@Time    : 2025/8/20 22:31
@Author  : QIN2DIM
@GitHub  : https://github.com/QIN2DIM
@Desc    :
"""
from .session_factory import GeminiSession, GeminiSessionFactory, describe_upstream_error

__all__ = ["GeminiSession", "GeminiSessionFactory", "describe_upstream_error"]
