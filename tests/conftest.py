# -*- coding: utf-8 -*-
"""
@Time    : 2025/8/22 14:02
@Author  : QIN2DIM
@GitHub  : https://github.com/QIN2DIM
@Desc    :
"""
import pytest

from tests.fakes import FakeChat, make_participants


@pytest.fixture
def group_chat():
    return FakeChat(participants=make_participants(3), is_group=True)


@pytest.fixture
def private_chat():
    return FakeChat(is_group=False)
