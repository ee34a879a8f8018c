import numpy as np
from PIL import Image

from bezierbrush.cli import main


def test_main_paints_and_saves(tmp_path, capsys):
    source = tmp_path / "in.png"
    target = tmp_path / "out.jpg"
    pixels = np.full((8, 12, 3), 128, dtype=np.uint8)
    Image.fromarray(pixels).save(source)

    assert main([str(source), str(target), "--seed", "1"]) == 0

    out = capsys.readouterr().out
    assert "Image loaded: 12 x 8 x 3 channels" in out
    with Image.open(target) as result:
        assert result.size == (12, 8)
        assert result.format == "JPEG"


def test_main_missing_input_fails(tmp_path, capsys):
    code = main([str(tmp_path / "absent.jpg"), str(tmp_path / "out.jpg")])
    assert code == 1
    assert "cannot load" in capsys.readouterr().err
    assert not (tmp_path / "out.jpg").exists()