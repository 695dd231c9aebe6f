# -*- encoding: utf-8 -*-
# @File   : consts.py
# @Time   : 2026/10/18 14:02:11
# @Author : Kariko Lin

# full-line comments, and inline ones once a value is split out.
COMMENT_MARKS = (';', '#')

SECTION_OPEN = '['
SECTION_CLOSE = ']'
DELIMITER = '='

# ASCII only. `str.strip()` would also eat NBSP and friends.
BLANKS = ' \t\n\r\v\f'

# utf-8-sig reads plain utf-8 as well, dropping a leading BOM if any.
DEFAULT_CODEC = 'utf-8-sig'
CODEC_CONFIDENCE = 0.8
# decodes any byte sequence.
FALLBACK_CODEC = 'latin-1'
