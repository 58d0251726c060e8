# scripts/run_server_local.py
"""Run the API locally against a data folder.

    python scripts/run_server_local.py

DATA_ROOT must contain one sub-folder per model (A.bin, B_dqi.csv, sectors.csv, ...).
"""

from __future__ import annotations

import os

import uvicorn

# ==== EDIT THESE AS YOU LIKE ==================================================
DATA_ROOT = r"./data"
HOST = "127.0.0.1"
PORT = 8080
# ==============================================================================

if __name__ == "__main__":
    os.environ.setdefault("DATA_ROOT", DATA_ROOT)
    uvicorn.run("backend.app.main:app", host=HOST, port=PORT, reload=False)
