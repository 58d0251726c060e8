from pathlib import Path

import pytest

from io_helpers import DEMANDS_CSV, DQI_TEXT, INDICATORS_CSV, SECTORS_CSV, m3x4, write_matrix, write_text


@pytest.fixture
def model_dir(tmp_path: Path) -> Path:
    folder = tmp_path / "USEEIO"
    folder.mkdir()
    write_matrix(folder, "A", m3x4())
    write_text(folder, "B_dqi.csv", DQI_TEXT)
    write_text(folder, "sectors.csv", SECTORS_CSV)
    write_text(folder, "indicators.csv", INDICATORS_CSV)
    write_text(folder, "demands.csv", DEMANDS_CSV)
    return folder
