"""
# Writers-Mark: constants.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Constants.
"""

EDGE_MATTER_DELIMITER = '---'
DEFAULT_PARAGRAPH_RULE_NAME = 'default'
LINKS_ENABLED_DEFAULT = True
MAX_NESTING_DEPTH = 256
VERBOSE_MODE_DIVIDER_SYMBOL_COUNT = 48

DEFAULT_COMMON_PROPERTY_PATTERNS = [
    'color',
    'background-color',
    'font*',
    'text-decoration',
]
DEFAULT_WHITELIST_PATTERNS = {
    'para': [*DEFAULT_COMMON_PROPERTY_PATTERNS, 'margin*', 'border', 'text-align'],
    'span': [*DEFAULT_COMMON_PROPERTY_PATTERNS],
    'cont': [*DEFAULT_COMMON_PROPERTY_PATTERNS],
}
