# scripts/inspect_model_local.py
from __future__ import annotations

from engine.api import Model, get_dqi_grid, get_matrix
from engine.contracts.choices import DQI_MATRIX_NAMES, NUMERIC_MATRIX_NAMES
from engine.contracts.errors import MatrixLoadError

# ==== EDIT THESE AS YOU LIKE ==================================================
MODEL_ID = "USEEIOv2.0"
MODEL_DIR = r"./data/USEEIOv2.0"
# ==============================================================================


def main() -> None:
    model = Model.from_folder(MODEL_ID, MODEL_DIR)
    print(f"{model.id}: {len(model.sectors)} sectors, {len(model.indicators)} indicators, "
          f"{len(model.demand_infos)} demand vectors")

    for name in NUMERIC_MATRIX_NAMES:
        try:
            m = get_matrix(model, name)
        except MatrixLoadError as e:
            print(f"  {name:6s} -- {e}")
            continue
        print(f"  {name:6s} {m.rows} x {m.cols}")

    for name in DQI_MATRIX_NAMES:
        try:
            g = get_dqi_grid(model, name)
        except MatrixLoadError as e:
            print(f"  {name:6s} -- {e}")
            continue
        widths = sorted({len(r) for r in g})
        print(f"  {name:6s} {len(g)} rows, row widths {widths}")


if __name__ == "__main__":
    main()
