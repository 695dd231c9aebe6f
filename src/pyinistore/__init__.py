# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/10/18 14:51:06
# @Author : Kariko Lin

import logging

from .ini import ConfigError, ConfigStore, IniParser, IniSectionProxy

__all__ = [
    'ConfigStore', 'ConfigError',
    'IniParser', 'IniSectionProxy'
]

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')
