import os

SORT_KEYS = True
OUTPUT_FORMAT = "json"
UPPERCASE = True
lowercase = True
