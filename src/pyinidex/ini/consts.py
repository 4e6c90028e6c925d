# -*- encoding: utf-8 -*-
# @File   : consts.py
# @Time   : 2024/11/02 21:52:07
# @Author : Kariko Lin

# compared after lower-casing. anything else reads as false.
TRUE_ALIASES = frozenset(('true', 'on', 'yes', '1'))

TRUE_PRINT = 'true'
FALSE_PRINT = 'false'

DEFAULT_ENCODING = 'utf-8'
DEFAULT_DELIMITER = ' = '
