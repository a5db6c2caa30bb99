from __future__ import annotations
import numpy as np
from PIL import Image

from bruhcodec import read_bruh, encode_image
from bruhwf.cli.main import main as bruh_main
from bruhwf.cli import convert as convert_cli


def _png(path, size=(4, 3), color=(10, 20, 30, 40)):
    path.parent.mkdir(parents=True, exist_ok=True)
    Image.new("RGBA", size, color=color).save(path)
    return path


def test_cli_convert_success(tmp_path, capsys):
    src = _png(tmp_path / "foo.png")
    rc = bruh_main(["convert", str(src)])
    assert rc == 0
    assert capsys.readouterr().out.strip() == "Successfully converted PNG to BRUH"
    hdr, pixels = read_bruh(tmp_path / "foo.bruh")
    assert (hdr.width, hdr.height) == (4, 3)
    assert pixels == bytes([10, 20, 30, 40]) * 12


def test_cli_convert_16bit_gray_png(tmp_path, capsys):
    src = tmp_path / "deep.png"
    Image.fromarray(np.full((2, 3), 40000, dtype=np.uint16)).save(src)
    assert bruh_main(["convert", str(src)]) == 0
    assert capsys.readouterr().out.strip() == "Successfully converted PNG to BRUH"
    hdr, pixels = read_bruh(tmp_path / "deep.bruh")
    assert (hdr.width, hdr.height) == (3, 2)
    assert pixels == bytes([156, 156, 156, 255]) * 6


def test_cli_convert_failure_is_generic(tmp_path, capsys):
    bad = tmp_path / "bad.png"; bad.write_text("nope")
    rc = bruh_main(["convert", str(bad)])
    assert rc == 1
    out = capsys.readouterr().out
    assert out.strip() == "Failed to convert PNG to BRUH"
    assert "nope" not in out and "decode" not in out


def test_cli_convert_dir_out_and_resume(tmp_path, capsys, monkeypatch):
    imgs = tmp_path / "imgs"
    _png(imgs / "a.png")
    Image.new("RGB", (2, 2), color=(1, 2, 3)).save(imgs / "b.bmp")
    out = tmp_path / "outputs"
    rc = convert_cli.main([str(imgs), "--out", str(out)])
    assert rc == 0
    assert sorted(p.name for p in out.glob("*.bruh")) == ["a.bruh", "b.bruh"]

    calls = []
    monkeypatch.setattr(convert_cli, "image_to_bruh", lambda *a, **kw: calls.append(a))
    rc = convert_cli.main([str(imgs), "--out", str(out), "--resume"])
    assert rc == 0 and calls == []


def test_cli_convert_uses_env_outputs_dir(tmp_path, monkeypatch):
    src = _png(tmp_path / "x.png")
    monkeypatch.setenv("BRUH_OUTPUTS_DIR", str(tmp_path / "envout"))
    assert bruh_main(["convert", str(src)]) == 0
    assert (tmp_path / "envout" / "x.bruh").exists()
    assert not (tmp_path / "x.bruh").exists()


def test_cli_view_hands_pixels_to_preview(tmp_path, capsys, monkeypatch):
    p = tmp_path / "img.whatever"
    img = Image.fromarray(np.arange(2 * 3 * 4, dtype=np.uint8).reshape(2, 3, 4))
    p.write_bytes(encode_image(img))

    shown = []
    import bruhviz
    monkeypatch.setattr(bruhviz, "show_preview", lambda w, h, px, **kw: shown.append((w, h, px)))
    rc = bruh_main([str(p)])
    assert rc == 0
    assert capsys.readouterr().out.strip() == "Loading a BRUH image with dimensions: 3 2"
    assert shown == [(3, 2, np.asarray(img).tobytes())]


def test_cli_view_no_window_save(tmp_path, capsys):
    p = tmp_path / "a.bruh"
    p.write_bytes(encode_image(Image.new("RGBA", (2, 2), color=(9, 8, 7, 6))))
    out_png = tmp_path / "prev" / "a.png"
    rc = bruh_main(["view", str(p), "--no-window", "--save", str(out_png)])
    assert rc == 0
    with Image.open(out_png) as im:
        assert im.size == (2, 2) and im.convert("RGBA").getpixel((1, 1)) == (9, 8, 7, 6)


def test_cli_view_surfaces_decode_error_text(tmp_path, capsys):
    p = tmp_path / "x.png"
    _png(p)
    rc = bruh_main([str(p), "--no-window"])
    assert rc == 1
    err = capsys.readouterr().err
    assert "File was not in BRUH format. (Header did not match magic number)" in err


def test_cli_view_short_file(tmp_path, capsys):
    p = tmp_path / "short.bruh"; p.write_bytes(b"BRUH")
    assert bruh_main([str(p), "--no-window"]) == 1
    assert "too short" in capsys.readouterr().err


def test_cli_view_strict(tmp_path, capsys):
    p = tmp_path / "trunc.bruh"
    p.write_bytes(encode_image(Image.new("RGBA", (4, 4)))[:-1])
    assert bruh_main([str(p), "--no-window"]) == 0
    assert bruh_main([str(p), "--no-window", "--strict"]) == 1
    assert "does not match" in capsys.readouterr().err
