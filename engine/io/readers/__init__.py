"""Parsing adapters (readers).

Readers are responsible for *format parsing* only (binary matrices, DQI grids,
metadata tables). Caching lives in :mod:`engine.runtime.caches`.

"""

from .base import model_file

from .matrix_reader import decode_matrix, encode_matrix, load_matrix
from .dqi_reader import decode_dqi_grid, load_dqi_grid
from .metadata_reader import read_demand_infos, read_indicators, read_meta_table, read_sectors

__all__ = [
    "model_file",
    "decode_matrix",
    "encode_matrix",
    "load_matrix",
    "decode_dqi_grid",
    "load_dqi_grid",
    "read_demand_infos",
    "read_indicators",
    "read_meta_table",
    "read_sectors",
]
