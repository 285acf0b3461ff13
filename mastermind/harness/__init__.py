from .core import run_case, run_batch
from .game import Game
from .io import write_csv, write_manifest

__all__ = ["run_case", "run_batch", "Game", "write_csv", "write_manifest"]
