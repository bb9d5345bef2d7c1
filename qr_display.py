# Description: Renders a text payload as a QR code in the terminal.

import io

import qrcode
import qrcode.constants


def build_qr(payload: str) -> qrcode.QRCode:
    qr = qrcode.QRCode(error_correction=qrcode.constants.ERROR_CORRECT_M, border=2)
    qr.add_data(payload)
    qr.make(fit=True)
    return qr


def render_qr(payload: str) -> str:
    """Return the QR code for payload as block characters, ready to print."""
    out = io.StringIO()
    build_qr(payload).print_ascii(out=out, invert=True)
    return out.getvalue()
