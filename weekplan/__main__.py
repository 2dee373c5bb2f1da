"""
FILE: weekplan/__main__.py
PURPOSE: Allow `python -m weekplan`
"""

from .cli.main import main

main()
