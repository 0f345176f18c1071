""" List of all common imports except __future__ and aliases"""

import re
import string
from dataclasses import dataclass, field
from enum import Enum
from typing import TextIO

__all__ = ["re", "string", "dataclass", "field", "Enum", "TextIO"]
