from qr_display import build_qr, render_qr

from conftest import G_B64


def test_render_produces_block_text():
    text = render_qr("REALITYCHECK:v1:" + G_B64)
    lines = text.splitlines()
    assert len(lines) > 10
    assert any("█" in line or "▀" in line or "▄" in line for line in lines)


def test_envelope_fits_in_qr():
    qr = build_qr("REALITYCHECK:v1:" + G_B64)
    assert qr.data_list
    assert 1 <= qr.version <= 40
