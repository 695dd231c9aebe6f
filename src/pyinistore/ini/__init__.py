# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/10 01:16:53
# @Author : Kariko Lin

from .model import IniSectionProxy, SectionTable
from .parser import ConfigError, IniParser
from .store import ConfigStore
