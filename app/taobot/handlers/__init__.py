# -*- coding: utf-8 -*-
"""
@Time    : 2025/8/21 19:02
@Author  : QIN2DIM
@GitHub  : https://github.com/QIN2DIM
@Desc    :
"""
from .chat_member import build_chat_member_handlers
from .message_handler import build_message_handler

__all__ = ["build_chat_member_handlers", "build_message_handler"]
