"""
Classes to facilitate working with Google Sheets
"""

from .resources import *
from .requests import *
from .ops import *
from .spreadsheet import GoogleSpreadSheet
