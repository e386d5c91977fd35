"""
Classes to facilitate working with Google Slides
"""

from .resources import *
from .requests import *
from .ops import *
from .presentation import GoogleSlidesPresentation
