from __future__ import annotations

import io

import qrcode


def render_qr(data: str) -> str:
    """Render ``data`` as a scannable QR code made of block characters."""
    qr = qrcode.QRCode(
        version=None,
        error_correction=qrcode.constants.ERROR_CORRECT_L,
        box_size=1,
        border=1,
    )
    qr.add_data(data)
    qr.make(fit=True)

    out = io.StringIO()
    qr.print_ascii(out=out)
    return out.getvalue()
