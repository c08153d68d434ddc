# rubik_reorient/__main__.py
from rubik_reorient.cli import run

run()
